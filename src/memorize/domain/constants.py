"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# 既定の絵柄（テーマ未指定時に使用する）
DEFAULT_EMOJIS: tuple[str, ...] = (
    "🐶", "🐸", "🐷", "🐔", "🐵", "🐮", "🐱", "🐯", "🐨", "🐥", "🐼", "🐰", "🐹",
)

# 既定のペア数
DEFAULT_PAIR_COUNT: int = 4

# カード1枚あたりのボーナス時間（秒）。0 はボーナスなし
DEFAULT_BONUS_TIME_LIMIT: float = 6.0

# 組み込みテーマ（テーマ名 -> 絵柄）
BUILTIN_THEMES: dict[str, tuple[str, ...]] = {
    "animals": DEFAULT_EMOJIS,
    "vehicles": ("🚗", "🚕", "🚌", "🚑", "🚒", "🚜", "🚲", "🛵", "🚂", "✈️", "🚀", "⛵"),
    "food": ("🍎", "🍌", "🍇", "🍉", "🍒", "🍑", "🍍", "🥝", "🍔", "🍕", "🍣", "🍩"),
}
DEFAULT_THEME: str = "animals"

# 裏向きカードの表示
CARD_BACK: str = "🂠"
