from dataclasses import dataclass
from typing import Optional

@dataclass
class Task:
    title: str
    description: str = ""
    id: Optional[int] = None
