"""Path parameters shared by the resource routers.

Invariants:
    - Record ids are positive and fit a 32-bit INTEGER column; anything else
      is rejected with 400 before a query runs
"""

from typing import Annotated

from fastapi import Path

MAX_RECORD_ID = 2**31 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]
