"""Pydantic models for Graph API entities and request inputs."""

from .base import (
    Action,
    Address,
    Category,
    GraphDateTime,
    GraphEntity,
    Place,
    Privacy,
    Reference,
    ReferenceList,
)
from .content import (
    Checkin,
    Comment,
    Link,
    Location,
    Message,
    Note,
    Notification,
    Post,
    Question,
    QuestionOption,
)
from .media import Album, Image, Photo, Tag, Video
from .social import (
    Achievement,
    Activity,
    Book,
    Domain,
    Event,
    Game,
    Group,
    GroupDoc,
    GroupMember,
    Insight,
    InsightValue,
    Interest,
    Like,
    Movie,
    Music,
    Page,
    RSVPStatus,
    Score,
    Television,
)
from .updates import (
    AlbumCreate,
    CheckinCreate,
    EventUpdate,
    GeoLocation,
    PhotoUpload,
    PictureSize,
    PostUpdate,
    PrivacySetting,
    TagUpdate,
)
from .user import (
    Account,
    Education,
    Family,
    Friend,
    Friendlist,
    FriendRequest,
    Permission,
    Poke,
    Subscribedto,
    Subscriber,
    TestUser,
    User,
    Work,
)

__all__ = [
    "Account",
    "Achievement",
    "Action",
    "Activity",
    "Address",
    "Album",
    "AlbumCreate",
    "Book",
    "Category",
    "Checkin",
    "CheckinCreate",
    "Comment",
    "Domain",
    "Education",
    "Event",
    "EventUpdate",
    "Family",
    "Friend",
    "FriendRequest",
    "Friendlist",
    "Game",
    "GeoLocation",
    "GraphDateTime",
    "GraphEntity",
    "Group",
    "GroupDoc",
    "GroupMember",
    "Image",
    "Insight",
    "InsightValue",
    "Interest",
    "Like",
    "Link",
    "Location",
    "Message",
    "Movie",
    "Music",
    "Note",
    "Notification",
    "Page",
    "Permission",
    "Photo",
    "PhotoUpload",
    "PictureSize",
    "Place",
    "Poke",
    "Post",
    "PostUpdate",
    "Privacy",
    "PrivacySetting",
    "Question",
    "QuestionOption",
    "RSVPStatus",
    "Reference",
    "ReferenceList",
    "Score",
    "Subscribedto",
    "Subscriber",
    "Tag",
    "TagUpdate",
    "Television",
    "TestUser",
    "User",
    "Video",
    "Work",
]
