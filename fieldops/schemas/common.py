# fieldops/schemas/common.py
from typing import List, Literal, Optional, Union

from pydantic import BaseModel

County = Literal["tablebay", "falsebay"]


class NoteEntry(BaseModel):
    text: str
    timestamp: Optional[str] = None


# notes: losse string (legacy) of lijst van {text, timestamp}
Notes = Union[str, List[NoteEntry]]
