"""Graph API connection names and special endpoint paths.

Connections are the path segments appended to an object id, as in
``{id}/feed`` or ``me/friends``. The resource clients compose every URL from
these names.
"""

# --- Special endpoints ---
SEARCH = "search"
FQL = "fql"

# --- Users ---
ACCOUNTS = "accounts"
ACTIVITIES = "activities"
BOOKS = "books"
GAMES = "games"
MOVIES = "movies"
MUSIC = "music"
TELEVISION = "television"
INTERESTS = "interests"
FAMILY = "family"
LOCATIONS = "locations"
SUBSCRIBERS = "subscribers"
SUBSCRIBEDTO = "subscribedto"
PERMISSIONS = "permissions"
POKES = "pokes"
LIKES = "likes"
PICTURE = "picture"

# --- Friends ---
FRIENDS = "friends"
MUTUAL_FRIENDS = "mutualfriends"
FRIEND_REQUESTS = "friendrequests"
FRIENDLISTS = "friendlists"
MEMBERS = "members"

# --- Posts ---
FEED = "feed"
HOME = "home"
POSTS = "posts"
STATUSES = "statuses"
TAGGED = "tagged"
INSIGHTS = "insights"
COMMENTS = "comments"

# --- Media ---
PHOTOS = "photos"
ALBUMS = "albums"
VIDEOS = "videos"
TAGS = "tags"

# --- Events ---
EVENTS = "events"
ATTENDING = "attending"
MAYBE = "maybe"
DECLINED = "declined"
INVITED = "invited"
NOREPLY = "noreply"

# --- Groups ---
GROUPS = "groups"
DOCS = "docs"

# --- Content ---
LINKS = "links"
NOTES = "notes"
CHECKINS = "checkins"
INBOX = "inbox"
OUTBOX = "outbox"
UPDATES = "updates"
NOTIFICATIONS = "notifications"
QUESTIONS = "questions"
OPTIONS = "options"

# --- Applications ---
SCORES = "scores"
ACHIEVEMENTS = "achievements"
TEST_USERS = "accounts/test-users"
