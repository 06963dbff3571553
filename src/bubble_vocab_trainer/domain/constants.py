"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# バブルの直径（px）: BUBBLE_MIN_SIZE 以上 BUBBLE_MIN_SIZE + BUBBLE_SIZE_SPREAD 未満
BUBBLE_MIN_SIZE: float = 80.0
BUBBLE_SIZE_SPREAD: float = 40.0

# 画面上部のヘッダー領域（px）。バブルはこの下側だけを移動する
HEADER_INSET: float = 60.0

# 1ラウンドで出題する単語数の範囲（両端含む）
ROUND_MIN_WORDS: int = 10
ROUND_MAX_WORDS: int = 15

# 出題から読み上げまでの遅延秒（画面遷移と音声が重ならないようにする）
SPEAK_DELAY: float = 0.5

# シミュレーションの基準フレームレートと、1 tick で追いつく最大フレーム数
FRAME_RATE: int = 60
MAX_CATCHUP_FRAMES: int = 30

# バブルの色（パステル）
BUBBLE_COLORS: list[str] = ["#FFB7B2", "#B5EAD7", "#C7CEEA", "#FFDAC1", "#E2F0CB", "#FF9AA2"]

# 効果音の周波数（Hz）
TONE_CORRECT_FREQS: tuple[float, float] = (523.25, 659.25)  # C5 -> E5
TONE_INCORRECT_FREQS: tuple[float, float] = (196.00, 174.61)  # G3 -> F3

# 同梱の単語リストで読み込むファイル（論理名 -> 許容列名の候補リスト）
COLUMN_ALIASES: dict[str, list[str]] = {
    "primary": ["english", "en", "primary", "英語"],
    "secondary": ["japanese", "ja", "secondary", "日本語"],
    "level": ["level", "difficulty", "レベル"],
}
