from typing import Annotated

from fastapi import Path

from ..database.base import MAX_ID

EntityId = Annotated[int, Path(gt=0, le=MAX_ID)]
