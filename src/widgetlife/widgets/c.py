"""Widget C: marks its node finished once post-init completes."""

import logging

from widgetlife.core import Widget

logger = logging.getLogger(__name__)


class WidgetC(Widget):

    async def pre_init(self, node):
        try:
            await super().pre_init(node)
            logger.info("Widget C pre-initialization.")
        except Exception as e:
            logger.error(f"Error during Widget C pre-initialization: {e}")
            self.fail(e)

    async def post_init(self, node=None):
        try:
            await super().post_init(node)
            if not self.has_failed and not self.is_destroyed:
                self.finish()
            logger.info("Widget C post-initialization.")
        except Exception as e:
            logger.error(f"Error during Widget C post-initialization: {e}")
            self.fail(e)
