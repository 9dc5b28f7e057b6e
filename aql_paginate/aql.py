"""Minimal immutable AQL expression supporting the clauses pagination needs."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


Statement = Tuple[str, Tuple[str, ...]]


class AQLQuery(BaseModel):
    """A ``FOR ... IN ...`` loop with chained statements.

    Every method returns a new query. Consecutive ``sort`` calls share one
    ``SORT`` statement, so the first key stays the primary one.

        >>> AQLQuery.for_("doc", "users").sort("doc.name", "DESC").limit(0, 10).return_("doc").to_aql()
        'FOR doc IN users SORT doc.name DESC LIMIT 0, 10 RETURN doc'
    """

    model_config = ConfigDict(frozen=True)

    variable: str = Field(description="Loop variable")
    collection: str = Field(description="Collection or expression iterated over")
    statements: Tuple[Statement, ...] = Field(default=(), description="Statements following the FOR line")

    @classmethod
    def for_(cls, variable: str, collection: str) -> "AQLQuery":
        return cls(variable=variable, collection=collection)

    def _append(self, keyword: str, *args: str) -> "AQLQuery":
        return self.model_copy(update={"statements": self.statements + ((keyword, args),)})

    def sort(self, path: str, direction: Optional[str] = None) -> "AQLQuery":
        key = f"{path} {direction}" if direction else path
        if self.statements and self.statements[-1][0] == "SORT":
            _, keys = self.statements[-1]
            statements = self.statements[:-1] + (("SORT", keys + (key,)),)
            return self.model_copy(update={"statements": statements})
        return self._append("SORT", key)

    def limit(self, offset: int, count: int) -> "AQLQuery":
        return self._append("LIMIT", str(offset), str(count))

    def return_(self, expression: str) -> "AQLQuery":
        return self._append("RETURN", expression)

    def to_aql(self) -> str:
        """Render the query as an AQL string."""
        parts = [f"FOR {self.variable} IN {self.collection}"]
        parts.extend(f"{keyword} {', '.join(args)}" for keyword, args in self.statements)
        return " ".join(parts)

    def __str__(self) -> str:
        return self.to_aql()
