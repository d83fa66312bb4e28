"""アプリケーションの設定モデル定義。

目的:
- UI とサービスの境界で用いる明示的な設定構造を提供する。
- サービス層は Settings を受け取り、ゲーム（EmojiMemoryGame）を構築する。

使い方:
- 起動時に config_loader.load_default_settings() で既定値を得てセッションに保存する。
- サイドバーで変更された値は新しい Settings としてサービスに渡す。
"""

from __future__ import annotations

from dataclasses import dataclass

from src.memorize.domain import DEFAULT_BONUS_TIME_LIMIT, DEFAULT_PAIR_COUNT, DEFAULT_THEME


@dataclass(frozen=True)
class Settings:
    """ゲーム構成に関する設定。

    現状の契約:
    - pair_count はデッキのペア数（0 以上）。
    - bonus_time_limit はカード1枚あたりのボーナス秒数（0 でボーナスなし）。
    - theme は絵柄セットの名前（config_loader.get_theme_emojis で解決する）。
    """

    pair_count: int = DEFAULT_PAIR_COUNT
    bonus_time_limit: float = DEFAULT_BONUS_TIME_LIMIT
    theme: str = DEFAULT_THEME
