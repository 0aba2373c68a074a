# src/werlost/labels.py
# Shop-style cell labels: prefix + theme + suffix, with one dominant theme per
# block so neighbourhoods read as a coherent district.

from .config import DEFAULT_CONFIG, WorldConfig
from .rng import HASH_MULT, hash_to_int

PREFIXES = (
    '亮星', '銀樹', '紅門', '青潮', '黃道', '白羽', '深空', '微光', '松竹', '石橋',
    '日出', '星河', '紫光', '雲頂', '山城', '港景', '街角', '海風', '竹影', '晴町',
    '木葉', '霧峰', '光輝', '川流', '新月', '鐵街', '雨巷', '東南', '北灣', '西港',
)

THEMES = (
    '咖啡☕', '麵包🥐', '藥房💊', '便利🛒', '診所⚕️', '書店📘', '文具✏️', '花店🌸', '茶館🍵', '冰室🧊',
    '餐室🍱', '早餐🥚', '超市🏪', '百貨🛍️', '手機📱', '服裝👗', '玩具🧸', '五金🔧', '報攤📰', '雜貨🧂',
    '水果🍎', '麵舖🍜', '點心🍡', '甜品🍰', '生活🧴', '市集🎪', '零食🍿', '飲品🥤', '湯品🍲', '麵食🍝',
)

SUFFIXES = (
    '舖', '店', '館', '小屋', '工房', '中心', '堂', '商號', '之森', '站',
    '坊', '市場', '部屋', '街角', '樓', '倉', '屋', '軒', '雜舖', '基地',
    '廚房', '工作室', '集', '社', '巷', '庭', '街屋', '園', '港', '棚',
)


def _block_hash(seed: str, x: int, y: int, block: int) -> int:
    return hash_to_int(f"{seed}:cluster:{x // block}:{y // block}")


def dominant_theme_index(seed: str, x: int, y: int, config: WorldConfig = DEFAULT_CONFIG) -> int:
    return _block_hash(seed, x, y, config.cluster_block) % len(THEMES)


def theme_index(seed: str, x: int, y: int, config: WorldConfig = DEFAULT_CONFIG) -> int:
    """Theme used by cell (x, y): the block's dominant one most of the time,
    otherwise the block's single alternate theme."""
    base = hash_to_int(f"{seed}:{x}:{y}")
    group = _block_hash(seed, x, y, config.cluster_block)
    dominant = group % len(THEMES)
    roll = (base // (HASH_MULT * HASH_MULT)) % 100
    if roll < config.dominant_percent:
        return dominant
    return (dominant + 1 + group % (len(THEMES) - 1)) % len(THEMES)


def cell_label(seed: str, x: int, y: int, config: WorldConfig = DEFAULT_CONFIG) -> str:
    base = hash_to_int(f"{seed}:{x}:{y}")
    prefix = PREFIXES[base % len(PREFIXES)]
    suffix = SUFFIXES[(base // HASH_MULT) % len(SUFFIXES)]
    return prefix + THEMES[theme_index(seed, x, y, config)] + suffix


def cluster_theme(seed: str, x: int, y: int, config: WorldConfig = DEFAULT_CONFIG) -> str:
    return THEMES[dominant_theme_index(seed, x, y, config)]
