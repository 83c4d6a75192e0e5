import logging

def setup_logging(level: str = "INFO") -> None:
    # Unknown level names fall back to INFO.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
