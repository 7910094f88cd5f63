"""Widget B: counts clicks dispatched to its node."""

import logging

from widgetlife.core import Widget

logger = logging.getLogger(__name__)


class WidgetB(Widget):
    """
    Counts ``click`` events on its node.

    The count starts from the node's ``data-clicks`` attribute, if present.
    """

    def __init__(self) -> None:
        super().__init__()
        self.clicks = 0

    async def pre_init(self, node):
        try:
            await super().pre_init(node)
            self.clicks = int(node.get_attribute("data-clicks") or 0)
            logger.info("Widget B pre-initialization.")
        except Exception as e:
            logger.error(f"Error during Widget B pre-initialization: {e}")
            self.fail(e)

    async def post_init(self, node=None):
        try:
            await super().post_init(node)
            logger.info("Widget B post-initialization.")
        except Exception as e:
            logger.error(f"Error during Widget B post-initialization: {e}")
            self.fail(e)

    def click_handler(self, *args, **kwargs) -> None:
        self.clicks += 1
        self.node.set_attribute("data-clicks", str(self.clicks))
