from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .errors import JistSyntaxError
from .types import Value


@dataclass
class BuiltinFunction:
    name: str
    arity: Optional[int]  # None accepts any number of arguments
    fn: Callable[[List[Value], Any], None]

    def check_arity(self, count: int):
        if self.arity is not None and count != self.arity:
            raise JistSyntaxError(f"{self.name} expects {self.arity} arguments, got {count}")

    def __call__(self, args: List[Value], ctx) -> None:
        self.check_arity(len(args))
        self.fn(args, ctx)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
