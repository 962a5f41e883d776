# funclab/callbacks.py
from typing import Callable

from funclab.utils.logger import logs


@logs.catch(msg="callback raised", log_time=False)
def fetch_with_callback(item_id: int, callback: Callable[[str], None]) -> None:
    """
    Build the payload for ``item_id`` and hand it to ``callback`` before
    returning. Runs synchronously; a failing callback propagates to the caller.
    """
    data = f"Data for ID {item_id}"
    callback(data)
