"""Widget A: the base lifecycle with failure funnelling."""

import logging

from widgetlife.core import Widget

logger = logging.getLogger(__name__)


class WidgetA(Widget):
    """Runs the base lifecycle; any error from it marks the widget failed."""

    async def pre_init(self, node):
        try:
            await super().pre_init(node)
        except Exception as e:
            logger.error(f"Error during Widget A pre-initialization: {e}")
            self.fail(e)

    async def post_init(self, node=None):
        try:
            await super().post_init(node)
        except Exception as e:
            logger.error(f"Error during Widget A post-initialization: {e}")
            self.fail(e)
