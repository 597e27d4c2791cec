"""Embedded sample spots shipped with the application."""

from tourist_spots.domain.models import Category, TouristSpot

SAMPLE_SPOTS: tuple[TouristSpot, ...] = (
    TouristSpot(
        name="台北 101",
        description="北台灣知名地標，高樓觀景。",
        image_name="taipei101",
        latitude=25.0330,
        longitude=121.5654,
        category=Category.LANDMARK_BUILDING,
    ),
    TouristSpot(
        name="高雄 85大樓",
        description="南台灣知名地標，高樓觀景。",
        image_name="bawudalou",
        latitude=22.6133,
        longitude=120.3005,
        category=Category.LANDMARK_BUILDING,
    ),
    TouristSpot(
        name="日月潭",
        description="中台灣美麗湖泊，適合划船和騎腳踏車。",
        image_name="sunmoonlake",
        latitude=23.8659,
        longitude=120.9150,
        category=Category.NATURE,
    ),
    TouristSpot(
        name="阿里山",
        description="以觀日、森林鐵道著稱的高山景點。",
        image_name="alishan",
        latitude=23.5083,
        longitude=120.8020,
        category=Category.NATURE,
    ),
    TouristSpot(
        name="佛光山",
        description="位於高雄市的大型佛教寺院，是知名的宗教與文化景點，設有佛陀紀念館。",
        image_name="foguangshan",
        latitude=22.7564,
        longitude=120.4039,
        category=Category.RELIGION,
    ),
    TouristSpot(
        name="烘爐地南山福德宮",
        description="位於新北市中和區的著名土地公廟，以巨大金爐與台北盆地夜景聞名，是祈福與觀光的熱門地點。",
        image_name="tudigong",
        latitude=25.0027,
        longitude=121.5077,
        category=Category.RELIGION,
    ),
    TouristSpot(
        name="安平古堡",
        description="位於台南市安平區的歷史古蹟，前身為荷蘭人建造的熱蘭遮城，是台灣最具代表性的西式城堡遺址之一。",
        image_name="anpinggubao",
        latitude=23.0013,
        longitude=120.1597,
        category=Category.HISTORY,
    ),
    TouristSpot(
        name="台灣原住民文化園區",
        description="位於屏東縣瑪家鄉，展示台灣多元原住民族的文化、藝術及傳統工藝，是了解原住民文化的重要場所。",
        image_name="tribe",
        latitude=22.5370,
        longitude=120.7122,
        category=Category.HISTORY,
    ),
)
