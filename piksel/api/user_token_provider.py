"""User token data provider (ws_user_token)."""

from typing import Any, Dict, Optional

from piksel.api.base import DataProvider
from piksel.api.queries import user_token_path
from piksel.config.settings import USER_TOKEN_ENDPOINT


class UserTokenDataProvider(DataProvider):
    """Mint short-lived user tokens from the configured API credentials."""

    endpoint = USER_TOKEN_ENDPOINT

    def fetch_data(self) -> Dict[str, Any]:
        path = user_token_path(self.config.api_username, self.config.api_password)
        return self.do_request(path, use_cache=False).data

    def get(self) -> Optional[str]:
        """
        Mint a fresh user token.

        Returns:
            The token, or None if the API refused the credentials.
        """
        data = self.get_data(refresh=True)
        if 'failure' in data or not data.get('token'):
            return None
        return data['token']

    def calculate_total_count(self) -> Optional[int]:
        return len(self.get_data())
