"""Configuration settings and constants for the piksel package."""

from typing import Dict, FrozenSet, Tuple

# API version used in read URLs (`/apiv/5`) and mutation headers
API_VERSION: str = '5'
WRITE_API_VERSION: str = '5.0'
HEADER_VERSION: int = 1

# Success codes whose payload is accepted by the response normalizer
ACCEPTED_SUCCESS_CODES: FrozenSet[int] = frozenset({
    224,  # User token found
    321,  # Account metadata found
    303,  # Programs found
    205,  # Asset found
    304,  # Assets found
    325,  # Thumbnail found
})

# Failure codes
ASSET_NOT_FOUND_CODE: int = 303
THUMBNAIL_NOT_FOUND_CODE: int = 903
MALFORMED_RESPONSE_CODE: int = 0

# Endpoints
ASSET_ENDPOINT = 'ws_asset'
ASSET_ASSOCIATIONS_ENDPOINT = 'ws_asset_associations'
PROGRAM_ENDPOINT = 'ws_program'
PROGRAM_SEARCH_ENDPOINT = 'ws_search_programs'
ACCOUNT_METADATA_ENDPOINT = 'ws_account_metadata'
THUMBNAIL_ENDPOINT = 'ws_thumbnail'
USER_TOKEN_ENDPOINT = 'ws_user_token'

# Custom account metadata names
CATEGORIES_METANAME = 'Categories'
TAG_MENU_METANAME = 'tag_menu'

# Pagination and sorting
DEFAULT_PAGE_SIZE: int = 20
ASSET_SORT: Tuple[str, str] = ('date_start', 'desc')
PROGRAM_SORT: Tuple[str, str] = ('sortnum', 'desc')
LATEST_PROGRAMS_SORT: Tuple[str, str] = ('dateStart', 'desc')

# Hidden assets are excluded from public listings
HIDDEN_PROPERTY = 'isHidden'
HIDDEN_VALUE = 1

# Thumbnail defaults
THUMBNAIL_WIDTH: int = 420
THUMBNAIL_HEIGHT: int = 315

# Request timeout in seconds
REQUEST_TIMEOUT_SECONDS: int = 10

USER_AGENT = 'piksel-python/1.0'

NO_CACHE_HEADERS: Dict[str, str] = {
    'Cache-Control': 'private, max-age=0, no-cache, no-store, must-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}

# Environment variables read by PikselConfig.from_env
ENV_VARIABLES: Dict[str, str] = {
    'baseURL': 'PIKSEL_BASE_URL',
    'token': 'PIKSEL_TOKEN',
    'clientToken': 'PIKSEL_CLIENT_TOKEN',
    'searchUUID': 'PIKSEL_SEARCH_UUID',
    'refIDPrefix': 'PIKSEL_REF_ID_PREFIX',
    'folderID': 'PIKSEL_FOLDER_ID',
    'clientName': 'PIKSEL_CLIENT_NAME',
    'readOnlyToken': 'PIKSEL_READ_ONLY_TOKEN',
    'debug': 'PIKSEL_DEBUG',
    'api.username': 'PIKSEL_API_USERNAME',
    'api.password': 'PIKSEL_API_PASSWORD',
}
