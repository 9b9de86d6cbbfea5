from __future__ import annotations
import logging

from hotelres.config import get_config
from hotelres.tools import get_engine

logger = logging.getLogger(__name__)


def main():
    config = get_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, config.get_log_level(), logging.INFO),
    )

    try:
        engine = get_engine()
    except Exception as e:
        logger.error(f"System Error: {e}", exc_info=True)
        raise SystemExit(1)

    active = engine.list_reservations(include_cancelled=False)
    logger.info(
        f"{config.get_hotel_display_name()} ready: {len(engine.list_rooms())} rooms, "
        f"{len(active)} active reservations"
    )
    if not engine.last_save_ok:
        logger.warning("Initial save failed; changes will not survive a restart until storage recovers.")


if __name__ == "__main__":
    main()
