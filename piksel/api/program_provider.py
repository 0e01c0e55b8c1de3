"""Program data provider (ws_program)."""

from typing import Any, Dict, Optional

from piksel.api.asset_provider import loosely_equal
from piksel.api.base import DataProvider
from piksel.api.envelope import ResponseEnvelope
from piksel.api.queries import (
    ResourceQuery,
    program_by_project_query,
    program_by_ref_query,
    program_by_uuid_query,
)
from piksel.config.settings import DEFAULT_PAGE_SIZE, PROGRAM_ENDPOINT, PROGRAM_SORT


class ProgramDataProvider(DataProvider):
    """
    Fetch programs of a project.

    Program lists are returned as ``{"programs": [...], "totalCount": n}``;
    failures keep their ``failure`` key and get a zero ``totalCount``.
    """

    endpoint = PROGRAM_ENDPOINT

    def fetch_data(
        self,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = PROGRAM_SORT[0],
        sort_dir: str = PROGRAM_SORT[1]
    ) -> Dict[str, Any]:
        """Fetch a page of programs of the default project."""
        return self.fetch_by_project_uuid(
            self.config.search_uuid, start, limit, sort_by, sort_dir
        )

    def fetch_by_project_uuid(
        self,
        project_uuid: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = PROGRAM_SORT[0],
        sort_dir: str = PROGRAM_SORT[1]
    ) -> Dict[str, Any]:
        """
        Fetch a page of programs of a project.

        Args:
            project_uuid: Project UUID.
            start: Offset of the first program.
            limit: Page size.
            sort_by: Program property (sortnum by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Program list payload.
        """
        query = ResourceQuery.for_programs(start, limit, sort_by, sort_dir)
        return self._program_list(self.do_request(program_by_project_query(project_uuid, query)))

    def fetch_by_ref_id(
        self,
        ref_id: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = PROGRAM_SORT[0],
        sort_dir: str = PROGRAM_SORT[1]
    ) -> Dict[str, Any]:
        """Fetch a page of programs by reference id (prefixed with refIDPrefix)."""
        query = ResourceQuery.for_programs(start, limit, sort_by, sort_dir)
        ref_id = f'{self.config.ref_id_prefix}{ref_id}'
        return self._program_list(self.do_request(program_by_ref_query(ref_id, query)))

    def fetch_by_program_uuid(self, program_uuid: str) -> Dict[str, Any]:
        """
        Fetch one program.

        Returns:
            The program, or the response data (failure) if none was found.
        """
        data = self.do_request(program_by_uuid_query(program_uuid)).data
        program = data.get('program')
        return program if isinstance(program, dict) else data

    def filter_programs_by_property(
        self,
        data: Dict[str, Any],
        prop: str,
        value: Any
    ) -> Dict[str, Any]:
        """
        Remove the programs whose `prop` equals `value`.

        Only top-level properties are looked up (see
        AssetDataProvider.filter_assets_by_property). Positive counts are
        set to the number of remaining programs.
        """
        if 'programs' not in data:
            return data

        data = dict(data)
        data['programs'] = [
            item for item in data['programs']
            if not (prop in item and loosely_equal(item[prop], value))
        ]
        for count_key in ('currentCount', 'totalCount'):
            if data.get(count_key, 0) > 0:
                data[count_key] = len(data['programs'])
        return data

    def calculate_total_count(self) -> Optional[int]:
        """Count the programs of the default project."""
        data = self.fetch_by_project_uuid(self.config.search_uuid, 0, 1)
        count = data.get('totalCount')
        return int(count) if count is not None else None

    @staticmethod
    def _program_list(envelope: ResponseEnvelope) -> Dict[str, Any]:
        if not envelope.ok:
            return {**envelope.data, 'totalCount': 0}

        programs = envelope.payload.get('programs') or []
        return {
            'programs': [p for p in programs if isinstance(p, dict)],
            'totalCount': envelope.total_count or 0,
        }
