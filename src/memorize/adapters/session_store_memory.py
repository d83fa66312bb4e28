"""辞書ベースのセッション状態アダプタ（Streamlit 非依存）。

テストやスクリプトからサービス層を直接呼び出すときに使う。
"""

from __future__ import annotations

from typing import Any

from src.memorize.app.ports.session_store import SessionStore


class InMemorySessionStore(SessionStore):
    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data
