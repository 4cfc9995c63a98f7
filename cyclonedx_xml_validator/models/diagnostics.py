# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Diagnostics collected while validating a single document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .result import ValidationResult


class DiagnosticKind(str, Enum):
    SCHEMA = "schema"
    WELL_FORMEDNESS = "well-formedness"
    NAMESPACE = "namespace"


_PREFIXES = {
    DiagnosticKind.SCHEMA: "Validation failed",
    DiagnosticKind.WELL_FORMEDNESS: "Document is not well-formed",
}


def _position(value: Any) -> Optional[int]:
    # libxml2 reports 0 when it has no position
    if isinstance(value, int) and value > 0:
        return value
    return None


@dataclass(frozen=True)
class Diagnostic:
    message: str
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based
    kind: DiagnosticKind = DiagnosticKind.SCHEMA

    @classmethod
    def from_log_entry(cls, entry: Any, kind: DiagnosticKind = DiagnosticKind.SCHEMA) -> "Diagnostic":
        """Create a Diagnostic from an lxml error log entry."""
        return cls(
            message=entry.message,
            line=_position(entry.line),
            column=_position(entry.column),
            kind=kind,
        )

    def format(self) -> str:
        prefix = _PREFIXES.get(self.kind)
        if prefix is None:
            return self.message

        if self.line is not None and self.column is not None:
            return f"{prefix} at line number {self.line} and position {self.column}: {self.message}"
        if self.line is not None:
            return f"{prefix} at line number {self.line}: {self.message}"
        return f"{prefix}: {self.message}"


class DiagnosticCollector:
    """Ordered, append-only buffer of diagnostics for one validation run."""

    def __init__(self) -> None:
        self._diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        kind: DiagnosticKind = DiagnosticKind.SCHEMA,
    ) -> None:
        """Add an error message.

        Args:
            message: Violation text reported by the parser or the namespace check
            line: Optional 1-based line number where the violation occurred
            column: Optional 1-based column number where the violation occurred
            kind: Which check produced the message
        """
        self.add(Diagnostic(message=message, line=line, column=column, kind=kind))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.add(diagnostic)

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._diagnostics))

    def to_result(self) -> ValidationResult:
        return ValidationResult.from_messages(d.format() for d in self._diagnostics)
