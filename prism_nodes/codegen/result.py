from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class CompiledResult:
    """
    Outcome of one compile call.

    On failure `code` and `helpers` are always None; `error_node_id` is set
    when a single node can be blamed. Results are shared by the
    compile cache, so every field is immutable.
    """
    success: bool
    code: Optional[str] = None
    error: Optional[str] = None
    error_node_id: Optional[str] = None
    helpers: Optional[Tuple[str, ...]] = None

    @classmethod
    def ok(cls, code: str, helpers: Iterable[str]) -> 'CompiledResult':
        return cls(success=True, code=code, helpers=tuple(helpers))

    @classmethod
    def failure(cls, error: str, error_node_id: Optional[str] = None) -> 'CompiledResult':
        return cls(success=False, error=error, error_node_id=error_node_id)

    def to_dict(self) -> Dict[str, Any]:
        """Editor-facing shape (camelCase keys, absent fields omitted)."""
        data: Dict[str, Any] = {'success': self.success}
        if self.code is not None:
            data['code'] = self.code
        if self.error is not None:
            data['error'] = self.error
        if self.error_node_id is not None:
            data['errorNodeId'] = self.error_node_id
        if self.helpers is not None:
            data['helpers'] = list(self.helpers)
        return data
