from datetime import datetime


def get_now() -> datetime:
    # Naive local wall-clock time; routes take it as a dependency so tests can pin it.
    return datetime.now()
