import logging
import sys

from PySide6.QtCore import QCoreApplication

from memory_config import ConfigurationError, DesktopConfiguration
from desktop_ui.session_bridge import SessionBridge

logger = logging.getLogger(__name__)


def main() -> int:
    try:
        config = DesktopConfiguration()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    app = QCoreApplication(sys.argv)

    try:
        bridge = SessionBridge(config)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    def on_ready() -> None:
        for slot in bridge.session.slots:
            logger.info("Slot %2d at %s holds %s", slot.index, slot.position, slot.instance)
        app.quit()

    def on_failed(error_type: str, message: str) -> None:
        logger.error("Deck setup failed (%s): %s", error_type, message)
        app.exit(1)

    bridge.deckReady.connect(on_ready)
    bridge.deckFailed.connect(on_failed)
    bridge.start()

    try:
        return app.exec()
    finally:
        bridge.cleanup()
