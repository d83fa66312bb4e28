"""
アプリケーション層のポート: セッションストア

目的:
- Streamlit の再描画をまたいで保持する値（設定・ゲーム本体・配札状態）を、
  UI フレームワークに依存せずにサービス層から読み書きする。

保持するキー:
- SETTINGS_KEY: 現在の Settings（新しいゲームを作るときの構成）
- GAME_KEY: プレイ中の EmojiMemoryGame（プロセス内オブジェクトのまま保持する）
- DEALT_KEY: 場に配り終えたカード id の set（表示上の状態。Card には持たせない）
"""

from __future__ import annotations

from typing import Any, Protocol

SETTINGS_KEY = "settings"
GAME_KEY = "game"
DEALT_KEY = "dealt"


class SessionStore(Protocol):
    """ゲームのセッション状態を保持するストア。

    契約:
    - 未設定のキーは default を返す（初回描画では何も入っていない）。
    - 値はコピーせずに保持する。ゲーム本体はストア越しに直接操作される。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - ゲーム本体などを保持するため Any
        """キーに対応する値を返す。未設定なら default。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - ゲーム本体などを保持するため Any
        """キーに値を保存する。"""
