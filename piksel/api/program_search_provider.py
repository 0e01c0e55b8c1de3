"""Program search data provider (ws_search_programs)."""

from typing import Any, Dict, Optional

from piksel.api.base import UNSET, DataProvider
from piksel.api.queries import ResourceQuery, program_search_query
from piksel.config.settings import DEFAULT_PAGE_SIZE, PROGRAM_SEARCH_ENDPOINT


class ProgramSearchDataProvider(DataProvider):
    """Full-text search of programs inside a project."""

    endpoint = PROGRAM_SEARCH_ENDPOINT

    def fetch_data(
        self,
        search: str = '*',
        project_uuid: Optional[str] = None,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = '',
        sort_dir: str = 'desc'
    ) -> Dict[str, Any]:
        """
        Search programs.

        The API returns the total count as a leading ``{"totalCount": n}``
        row; it is lifted into the payload's 'totalCount' and remembered
        as the provider's total count.

        Args:
            search: Search string ('*' matches everything).
            project_uuid: Project to search in.
            start: Offset of the first program.
            limit: Page size.
            sort_by: Sort field ('' for relevance).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Payload with a 'programs' list and 'totalCount', or a failure.

        Raises:
            ValueError: If no project UUID is given.
        """
        if not project_uuid:
            raise ValueError('Project UUID not provided')

        query = ResourceQuery(start=start, limit=limit, sort_by=sort_by, sort_dir=sort_dir)
        envelope = self.do_request(program_search_query(search, project_uuid, query))
        if not envelope.ok:
            return envelope.data

        data = dict(envelope.payload)
        head = data.pop('0', None)
        items = data.pop('items', None)
        if head is None and items:
            if isinstance(items[0], dict) and 'totalCount' in items[0]:
                head, data['programs'] = items[0], items[1:]
            else:
                data['programs'] = list(items)

        if isinstance(head, dict) and 'totalCount' in head:
            data['totalCount'] = int(head['totalCount'])
            self.set_total_count(data['totalCount'])

        data.setdefault('programs', [])
        return data

    def calculate_total_count(self) -> Optional[int]:
        """Total count of the last search, if one ran."""
        return None if self._total_count is UNSET else self._total_count
