from __future__ import annotations

import logging
import random
import time

from src.memorize.app.ports.session_store import DEALT_KEY, GAME_KEY, SETTINGS_KEY, SessionStore
from src.memorize.app.state import Settings
from src.memorize.domain import Clock
from src.memorize.services.config_loader import get_theme_emojis, load_default_settings
from src.memorize.services.emoji_game import EmojiMemoryGame

logger = logging.getLogger(__name__)


def initialize_state(store: SessionStore) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    """
    if store.get(SETTINGS_KEY) is None:
        store.set(SETTINGS_KEY, load_default_settings())
    if store.get(GAME_KEY) is None:
        new_game(store)
    # 配札済みカード id（表示上の状態。ゲーム本体には持たせない）
    if store.get(DEALT_KEY) is None:
        store.set(DEALT_KEY, set())


def new_game(
    store: SessionStore,
    settings: Settings | None = None,
    *,
    clock: Clock = time.monotonic,
    rng: random.Random | None = None,
) -> EmojiMemoryGame:
    """設定からゲームを作り直し、配札状態もリセットする。

    settings が指定されればセッションの設定も置き換える。
    """
    if settings is not None:
        store.set(SETTINGS_KEY, settings)
    current: Settings = store.get(SETTINGS_KEY) or Settings()
    game = EmojiMemoryGame(
        get_theme_emojis(current.theme),
        current.pair_count,
        bonus_time_limit=current.bonus_time_limit,
        clock=clock,
        rng=rng,
    )
    store.set(GAME_KEY, game)
    store.set(DEALT_KEY, set())
    logger.info(
        "new game: theme=%s pairs=%d bonus_time_limit=%.1f",
        current.theme,
        current.pair_count,
        current.bonus_time_limit,
    )
    return game


def get_game(store: SessionStore) -> EmojiMemoryGame:
    """セッションのゲームを返す。未作成なら作る。"""
    game: EmojiMemoryGame | None = store.get(GAME_KEY)
    if game is None:
        game = new_game(store)
    return game
