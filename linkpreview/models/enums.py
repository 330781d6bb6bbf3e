from enum import Enum


class Platform(str, Enum):
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    FACEBOOK = "facebook"
    APPLE_MAPS = "apple_maps"
    WEBSITE = "website"


class ContentType(str, Enum):
    POST = "post"
    REEL = "reel"
    PROFILE = "profile"
    PAGE = "page"
    VIDEO = "video"
