from pathlib import Path

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Data layout
MANIFEST_FILENAME = "mcp-servers.json"
EVALUATIONS_DIRNAME = "mcp-evaluations"

# Public URLs
WEBSITE_BASE_URL = "https://archestra.ai"
MCP_CATALOG_URL = f"{WEBSITE_BASE_URL}/mcp-catalog"
MCP_CATALOG_API_URL = f"{MCP_CATALOG_URL}/api"
WEBSITE_REPO_URL = "https://github.com/archestra-ai/website"
EVALUATIONS_REPO_PATH = "app/app/mcp-catalog/data/mcp-evaluations"
GITHUB_BASE_URL = "https://github.com"

# Hosts whose URLs are treated as source repositories, anything else is a remote endpoint
REPOSITORY_HOSTS = ("github.com", "gitlab.com")
REMOTE_HOST_PREFIXES = ("www.", "mcp.", "api.")

# Loader
CACHE_KEY_ALL = "__ALL_SERVERS__"
PENDING_DESCRIPTION = "We're evaluating this MCP server"

# Sub-score maximums
MAX_PROTOCOL_SCORE = 40
MAX_COMMUNITY_SCORE = 20
MAX_DEPLOYMENT_SCORE = 10
MAX_DOCUMENTATION_SCORE = 8
MAX_DEPENDENCY_SCORE = 20
MAX_BADGE_SCORE = 2

# Protocol feature weights (sum to MAX_PROTOCOL_SCORE)
PROTOCOL_FEATURE_WEIGHTS = {
    "implementing_tools": 8,
    "implementing_resources": 8,
    "implementing_prompts": 5,
    "implementing_sampling": 5,
    "implementing_stdio": 4,
    "implementing_streamable_http": 4,
    "implementing_roots": 3,
    "implementing_logging": 3,
    "implementing_oauth2": 2,
}
PROTOCOL_UNANALYZED_SCORE = 35

# Community step functions: (exclusive lower bound, points), checked top-down
STAR_STEPS = [(1000, 10), (500, 8), (100, 6), (50, 4), (10, 2)]
# Contributors: above 10 gets 6, then (inclusive lower bound, points)
CONTRIBUTOR_TOP_STEP = (10, 6)
CONTRIBUTOR_STEPS = [(4, 4), (2, 2)]
ISSUE_STEPS = [(20, 4), (5, 2)]

# Deployment maturity
CI_CD_POINTS = 5
RELEASES_POINTS = 5

# Documentation
README_MIN_LENGTH = 100

# Badge usage
BRAND_NAME = "archestra"

# Dependencies
DEPENDENCY_UNANALYZED_SCORE = 15
SIGNIFICANT_IMPORTANCE = 5
MAX_SIGNIFICANT_DEPENDENCIES = 10
MAX_DEPENDENCY_COUNT_PENALTY = 10
RARITY_MIN_POPULATION = 10  # population must be larger than this
RARE_DEPENDENCY_USAGE = 5  # used by fewer records than this
RARE_DEPENDENCY_PENALTY = 2
MAX_RARITY_PENALTY = 10

# Remote servers without a repository are not evaluated against repository signals
REMOTE_SCORE_BREAKDOWN = {
    "mcp_protocol": 30,
    "github_metrics": 15,
    "deployment_maturity": 8,
    "documentation": 6,
    "dependencies": 15,
    "badge_usage": 1,
    "total": 75,
}

# Badges
BADGE_LABEL = "Trust Score"
BADGE_PENDING_COLOR = "#9f9f9f"
BADGE_LABEL_COLOR = "#555"
BADGE_CALCULATING_MESSAGE = "Calculating..."
BADGE_PENDING_MESSAGE = "Pending"
BADGE_COLOR_STEPS = [
    (90, "#059669"),
    (80, "#10b981"),
    (70, "#34d399"),
    (60, "#6ee7b7"),
    (50, "#5eead4"),
    (40, "#eab308"),
    (30, "#f97316"),
]
BADGE_LOWEST_COLOR = "#ef4444"
BADGE_SCORE_MESSAGE_THRESHOLD = 80
BADGE_GOOD_MESSAGE_THRESHOLD = 50
BADGE_PENDING_MAX_AGE = 300  # 5 minutes
BADGE_SCORED_MAX_AGE = 3600  # 1 hour
BADGE_CHAR_WIDTH = 6
BADGE_PADDING = 20
BADGE_HEIGHT = 20

# Search
SEARCH_DEFAULT_LIMIT = 20
SEARCH_MAX_LIMIT = 100
