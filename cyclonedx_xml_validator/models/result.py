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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one document.

    ``valid`` is True exactly when ``messages`` is empty.
    """

    valid: bool
    messages: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        messages = tuple(self.messages)
        object.__setattr__(self, "messages", messages)
        if self.valid == bool(messages):
            raise ValueError(
                f"Inconsistent validation result: valid={self.valid} with {len(messages)} message(s)"
            )

    @classmethod
    def from_messages(cls, messages: Iterable[str]) -> "ValidationResult":
        messages = tuple(messages)
        return cls(valid=not messages, messages=messages)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "messages": list(self.messages)}

    def __bool__(self) -> bool:
        return self.valid
