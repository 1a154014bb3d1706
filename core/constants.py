# Watch Target
DEFAULT_TARGET_URL = "https://info.monsterhunter.com/wilds/update/ko-kr/"
DEFAULT_STATE_FILE = "last_seen.json"

# Candidate Extraction
# Group 1 captures the dotted numeric version, e.g. "1.021.01.00"
DEFAULT_VERSION_PATTERN = r"Ver\.(\d+(?:\.\d+)+)"

# Network Settings
DEFAULT_REQUEST_TIMEOUT = 15  # Seconds
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome Safari"
)
DEFAULT_ACCEPT_LANGUAGE = "ko-KR, ko;q=0.9, en;q=0.8"

# Notification Settings
DEFAULT_NOTIFY_HEADER = "**몬스터헌터 와일즈 업데이트 감지!**"
VERSION_LINE_PREFIX = "버전: "
DISCORD_MAX_CONTENT_LENGTH = 2000
DISCORD_EMBED_COLOR = 0x2ECC71

# Default Configuration Values
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "watcher.log"
DEFAULT_LOG_FORMAT = "text"  # text or json
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_LOG_BACKUP_COUNT = 3

# Exit Codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
