"""
遊び方ページ
- 設定ファイルの [pages] how_to_play があればそれを、無ければ既定の説明を表示します。
"""

import streamlit as st

from src.memorize.domain import DEFAULT_BONUS_TIME_LIMIT
from src.memorize.services.config_loader import get_how_to_play_text

_DEFAULT_TEXT = f"""
- 山札をクリックしてカードを配ります。
- カードを1枚めくり、続けてもう1枚めくります。同じ絵柄ならペア成立です。
- 絵柄が違えば先にめくったカードは裏返り、あとからめくったカードが1枚目になります。
- めくってから一致させるまでの時間が短いほどボーナスを得られます
  （既定では1枚あたり {DEFAULT_BONUS_TIME_LIMIT:.0f} 秒）。
- 「シャッフル」で並びを入れ替え、「リスタート」で最初からやり直します。
"""

st.set_page_config(page_title="遊び方", layout="wide")
st.title("遊び方")
st.markdown(get_how_to_play_text(_DEFAULT_TEXT))
