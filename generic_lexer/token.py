from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar, Union

K = TypeVar("K")


@dataclass(frozen=True)
class Token(Generic[K]):
    """A token with a kind (usually an enum member) and its source text.

    ``start``/``end`` are the source offsets covered by the lexing step that
    produced the token. They are informational and left out of comparisons,
    so ``Token(Kind.NAME, "a")`` equals the token lexed from ``"a"``.
    """

    kind: K
    text: Union[str, bytes]
    start: Optional[int] = field(default=None, compare=False)
    end: Optional[int] = field(default=None, compare=False)

    @property
    def span(self) -> Optional[tuple[int, int]]:
        if self.start is None or self.end is None:
            return None
        return self.start, self.end

    def is_kind(self, *kinds: K) -> bool:
        """True if this token is of any of the given kinds"""
        return self.kind in kinds

    def __repr__(self):
        name = getattr(self.kind, "name", self.kind)
        return f"Token({name}, {self.text!r})"
