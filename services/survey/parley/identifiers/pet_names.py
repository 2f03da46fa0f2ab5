"""Whimsical creator-alias pools, one per supported language."""

CHINESE_PET_NAMES: tuple[str, ...] = (
    # Reduplication
    "胖墩墩", "毛球球", "咕噜噜", "嘟嘟", "团团", "圆圆", "泡泡", "豆豆", "糖糖", "果果",
    # Food
    "小土豆", "皮蛋", "年糕", "汤圆", "小笼包", "馒头", "饺子", "包子", "烧麦", "春卷",
    "麻薯", "布丁", "奶酪", "薯条", "鸡腿", "肉丸", "虾饺", "蛋挞", "麻花", "油条",
    # Animal nicknames
    "小肥猪", "懒羊羊", "呆萌鸡", "二哈", "橘猫", "奶牛", "小鹦鹉", "胖企鹅", "萌兔兔", "小刺猬",
    # Onomatopoeia
    "喵喵", "汪汪", "叽叽", "咩咩", "哞哞", "嘎嘎", "咕咕", "吱吱", "呱呱", "嗡嗡",
    # Cute adjective + noun
    "小胖子", "肉肉", "糯米糍", "小泡芙", "棉花糖", "软糖", "果冻", "奶茶", "芋圆", "西米露",
)

ENGLISH_PET_NAMES: tuple[str, ...] = (
    # Food
    "Nugget", "Biscuit", "Pudding", "Muffin", "Pickle", "Waffles", "Pancake", "Noodle", "Taco",
    "Pretzel", "Dumpling", "Cookie", "Brownie", "Cupcake", "Jellybean", "Marshmallow", "Peanut",
    "Cashew", "Pistachio", "Walnut",
    # Silly titles
    "Mr.Wobbles", "Sir.Fluffington", "Captain.Snuggles", "Dr.Whiskers", "Baron.Boop",
    "Count.Fuzzy", "Duke.Waddles", "Lord.Pudge",
    # Texture / appearance
    "Fluffkins", "Fuzzbucket", "Butterball", "Chonkers", "Chunky", "Tubbs", "Squish",
    "Puffball", "Pompom", "Furball",
    # Sound-based
    "Squeaky", "Snorty", "Grunty", "Chirpy", "Peppy", "Zippy", "Bouncy", "Wiggles", "Giggles",
    "Bubbles",
)

_POOLS: dict[str, tuple[str, ...]] = {
    "zh": CHINESE_PET_NAMES,
    "en": ENGLISH_PET_NAMES,
}


def pool_for(language: str) -> tuple[str, ...]:
    """Pet names for a language tag such as ``zh`` or ``zh-CN``; English otherwise."""
    primary = language.split("-", 1)[0].split("_", 1)[0].lower()
    return _POOLS.get(primary, ENGLISH_PET_NAMES)
