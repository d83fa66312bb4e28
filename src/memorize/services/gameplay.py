from __future__ import annotations

import logging

from src.memorize.app.ports.session_store import DEALT_KEY, SessionStore
from src.memorize.domain import Card
from src.memorize.services.app_state import get_game

logger = logging.getLogger(__name__)

# UI コンポーネントからのイベント（カード選択、シャッフル、リスタート、配札）を受け取り、
# ゲーム操作とセッション状態の更新を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。


def handle_card_click(store: SessionStore, card_id: int) -> bool:
    """カード選択をゲームに渡す。状態が変わったら True。

    一致済み・表向き・存在しないカードの選択は何もしない。
    """
    game = get_game(store)
    changed = game.choose(card_id)
    logger.debug("choose card_id=%s changed=%s", card_id, changed)
    if changed and game.is_finished:
        logger.info("all %d pairs matched", game.pair_count)
    return changed


def handle_shuffle(store: SessionStore) -> None:
    get_game(store).shuffle()
    logger.debug("shuffle")


def handle_restart(store: SessionStore) -> None:
    """同じ構成でゲームをやり直す。配札状態も空に戻す。"""
    store.set(DEALT_KEY, set())
    get_game(store).restart()
    logger.debug("restart")


# ---- 配札（表示上の状態） ----


def _dealt(store: SessionStore) -> set[int]:
    dealt: set[int] | None = store.get(DEALT_KEY)
    if dealt is None:
        dealt = set()
        store.set(DEALT_KEY, dealt)
    return dealt


def deal(store: SessionStore, card_id: int) -> None:
    dealt = _dealt(store)
    dealt.add(card_id)
    store.set(DEALT_KEY, dealt)


def deal_all(store: SessionStore) -> None:
    """山札のカードをすべて場に配る。"""
    for card in get_game(store).cards:
        deal(store, card.id)
    logger.debug("deal all")


def is_undealt(store: SessionStore, card_id: int) -> bool:
    return card_id not in _dealt(store)


def undealt_cards(store: SessionStore) -> list[Card[str]]:
    return [c for c in get_game(store).cards if is_undealt(store, c.id)]


def is_card_visible(store: SessionStore, card: Card[str]) -> bool:
    """場に表示するか。未配札、または一致済みで裏向きのカードは空きマスにする。"""
    if is_undealt(store, card.id):
        return False
    return not (card.is_matched and not card.is_face_up)
