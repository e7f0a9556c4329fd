# winners/core/schemas.py
from typing import List
from pydantic import BaseModel, Field

# -------- Sorteo --------
class Winner(BaseModel):
    position: int = Field(ge=1)  # 1-based, draw order
    name: str


class DrawResult(BaseModel):
    participants: int
    seed: int
    winners: List[Winner]
