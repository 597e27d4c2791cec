"""Embedded string tables, one per supported language."""

from tourist_spots.domain.models import Language

STRING_TABLES: dict[Language, dict[str, str]] = {
    Language.TRADITIONAL_CHINESE: {
        "tourism_title": "台灣旅遊景點",
        "favorites_title": "我的收藏",
        "map_title": "景點地圖",
        "language_settings": "語言設定",
        "category_all": "全部",
        "category_nature": "自然",
        "category_landmark_building": "地標建築",
        "category_history": "歷史",
        "category_religion": "宗教",
        "add_favorite": "加入收藏",
        "remove_favorite": "取消收藏",
        "no_favorites": "尚無收藏",
        "no_results": "找不到景點",
    },
    Language.ENGLISH: {
        "tourism_title": "Taiwan Tourist Spots",
        "favorites_title": "Favorites",
        "map_title": "Map",
        "language_settings": "Language Settings",
        "category_all": "All",
        "category_nature": "Nature",
        "category_landmark_building": "Landmarks & Buildings",
        "category_history": "History",
        "category_religion": "Religion",
        "add_favorite": "Add to Favorites",
        "remove_favorite": "Remove from Favorites",
        "no_favorites": "No favorites yet",
        "no_results": "No spots found",
    },
    Language.JAPANESE: {
        "tourism_title": "台湾観光スポット",
        "favorites_title": "お気に入り",
        "map_title": "地図",
        "language_settings": "言語設定",
        "category_all": "すべて",
        "category_nature": "自然",
        "category_landmark_building": "ランドマーク・建築",
        "category_history": "歴史",
        "category_religion": "宗教",
        "add_favorite": "お気に入りに追加",
        "remove_favorite": "お気に入りから削除",
        "no_favorites": "お気に入りはまだありません",
        "no_results": "スポットが見つかりません",
    },
}
