"""Piksel client: read accessors and mutation workflows over the Piksel API."""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from loguru import logger

from piksel.api.asset_provider import AssetDataProvider
from piksel.api.http_client import HttpClient
from piksel.api.metadata_provider import (
    AccountMetadataDataProvider,
    CategoriesDataProvider,
    TagMenuDataProvider,
)
from piksel.api.program_provider import ProgramDataProvider
from piksel.api.program_search_provider import ProgramSearchDataProvider
from piksel.api.thumbnail_provider import ThumbnailDataProvider
from piksel.api.user_token_provider import UserTokenDataProvider
from piksel.api.writer import MutationResult, MutationWriter
from piksel.config.manager import PikselConfig
from piksel.config.settings import (
    ASSET_SORT,
    CATEGORIES_METANAME,
    DEFAULT_PAGE_SIZE,
    HIDDEN_PROPERTY,
    HIDDEN_VALUE,
    LATEST_PROGRAMS_SORT,
    PROGRAM_SORT,
)
from piksel.models.cache import SessionCache
from piksel.models.category import Category
from piksel.models.video import Video
from piksel.status import AssetStatus, classify_asset_status
from piksel.utils.text import humanize, natural_sort_key

VideoMap = Dict[str, Video]


class PikselClient:
    """
    Facade over the Piksel data providers.

    Reads return :class:`Video` and :class:`Category` objects and are
    memoized in a :class:`SessionCache` owned by the caller. Absent results
    are returned as None. Mutations return a :class:`MutationResult`.

    In debug mode the client uses a private cache, so every client instance
    starts from scratch, and providers bypass HTTP caches.

    Attributes:
        config: Piksel configuration.
        cache: Session cache of videos, tag and project collections.
    """

    def __init__(
        self,
        config: Union[PikselConfig, Mapping[str, Any]],
        http: Optional[HttpClient] = None,
        cache: Optional[SessionCache] = None,
        asset_provider: Optional[AssetDataProvider] = None,
        program_provider: Optional[ProgramDataProvider] = None,
        program_search_provider: Optional[ProgramSearchDataProvider] = None,
        categories_provider: Optional[CategoriesDataProvider] = None,
        tag_menu_provider: Optional[TagMenuDataProvider] = None,
        thumbnail_provider: Optional[ThumbnailDataProvider] = None,
        user_token_provider: Optional[UserTokenDataProvider] = None,
        writer: Optional[MutationWriter] = None
    ) -> None:
        """
        Initialize the client.

        Args:
            config: A PikselConfig, or a mapping in the Piksel option format
                (see PikselConfig.from_mapping).
            http: HTTP transport shared by all providers.
            cache: Session cache; a new one is created if None.
            asset_provider: Asset provider override.
            program_provider: Program provider override.
            program_search_provider: Program search provider override.
            categories_provider: Categories provider override.
            tag_menu_provider: Tag menu provider override.
            thumbnail_provider: Thumbnail provider override.
            user_token_provider: User token provider override.
            writer: Mutation writer override.

        Raises:
            ConfigurationError: If a required option is missing.
        """
        if isinstance(config, PikselConfig):
            self.config = config.ensure_valid()
        else:
            self.config = PikselConfig.from_mapping(config)

        self.http = http or HttpClient()

        if self.config.debug:
            logger.debug("Debug mode: session cache disabled")
            cache = SessionCache()
        self.cache = cache if cache is not None else SessionCache()

        account_metadata = None
        if categories_provider is None or tag_menu_provider is None:
            account_metadata = AccountMetadataDataProvider(self.config, self.http)

        self.asset_provider = asset_provider or AssetDataProvider(self.config, self.http)
        self.program_provider = program_provider or ProgramDataProvider(self.config, self.http)
        self.program_search_provider = (
            program_search_provider or ProgramSearchDataProvider(self.config, self.http)
        )
        self.categories_provider = categories_provider or CategoriesDataProvider(
            self.config, self.http, account_metadata
        )
        self.tag_menu_provider = tag_menu_provider or TagMenuDataProvider(
            self.config, self.http, account_metadata
        )
        self.thumbnail_provider = thumbnail_provider or ThumbnailDataProvider(self.config, self.http)
        self.user_token_provider = user_token_provider or UserTokenDataProvider(self.config, self.http)
        self.writer = writer or MutationWriter(self.config, self.http)

        self._tag_menu: Optional[Dict[str, str]] = None
        self._total_count: Optional[int] = None
        self._categories: Optional[Dict[str, Category]] = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_tag_menu(self) -> Optional[Dict[str, str]]:
        """
        Return the tags of the tag menu.

        Returns:
            Trimmed tags keyed by themselves, None if no menu is defined.
        """
        if not self._tag_menu:
            tags = self.tag_menu_provider.get_data()
            if tags:
                self._tag_menu = {tag.strip(): tag.strip() for tag in tags}
        return self._tag_menu

    def get_total_count(self) -> Optional[int]:
        """Return the number of programs in the default project."""
        if not self._total_count:
            self._total_count = self.program_provider.get_total_count()
        return self._total_count

    def get_latest_videos(self) -> Optional[VideoMap]:
        """
        Return the latest videos of the default project.

        The first page of programs, by start date, is fetched once per
        session; hidden programs are excluded.

        Returns:
            Videos keyed by slug, None if the project has no visible program.
        """
        if not self.cache:
            data = self.program_provider.fetch_by_project_uuid(
                self.config.search_uuid,
                0,
                DEFAULT_PAGE_SIZE,
                *LATEST_PROGRAMS_SORT
            )
            data = self.program_provider.filter_programs_by_property(
                data, HIDDEN_PROPERTY, HIDDEN_VALUE
            )
            if 'failure' in data or not data.get('totalCount') or not data.get('programs'):
                return None
            for video in self._build_videos(data['programs']).values():
                self.cache.set(video)

        return dict(self.cache.videos)

    def get_raw_latest_videos(self) -> Optional[VideoMap]:
        """
        Return the latest published assets of the account.

        Returns:
            At most 20 videos keyed by slug, None if there is none.
        """
        if not self.cache:
            data = self.asset_provider.fetch_data()
            if 'asset' not in data or not data.get('totalCount'):
                return None
            for video in self._build_videos(data['asset']).values():
                self.cache.set(video)

        slugs = list(self.cache.videos)[:DEFAULT_PAGE_SIZE]
        return {slug: self.cache.videos[slug] for slug in slugs}

    def sort_video_collection(
        self,
        sort_by: str = 'last_modified',
        sort_dir: str = 'desc'
    ) -> VideoMap:
        """
        Sort the videos of the session in place.

        Values are compared in natural order ("video2" before "video10");
        an unknown attribute leaves the order unchanged.

        Args:
            sort_by: Video attribute ('last_modified', 'title', 'duration'...).
            sort_dir: 'asc' or 'desc'.

        Returns:
            The sorted videos keyed by slug.
        """
        def sort_key(video: Video) -> Any:
            if sort_by == 'last_modified':
                return video.last_modified.timestamp()
            value = getattr(video, sort_by, '')
            if callable(value):
                value = value()
            return natural_sort_key(value)

        videos = sorted(self.cache.videos.values(), key=sort_key)
        if sort_dir == 'desc':
            videos.reverse()

        self.cache.videos = {video.slug: video for video in videos}
        return dict(self.cache.videos)

    def get_video_by_slug(self, slug: str) -> Optional[Video]:
        """
        Return a video from its slug.

        A slug cannot always be turned back into a title: on a cache miss
        the slug itself is searched as a title.

        Returns:
            The video, None if not found.
        """
        video = self.cache.get(slug)
        if video:
            return video

        data = self.asset_provider.fetch_asset_by_title(slug)
        if 'assetid' not in data:
            return None
        return self.cache.set(Video(data))

    def get_categories(self) -> Optional[Dict[str, Category]]:
        """
        Return the categories of the account.

        Returns:
            Categories keyed by slug, None if the account defines none.
        """
        if not self._categories:
            titles = self.categories_provider.get_data()
            if titles:
                categories = (Category(title) for title in titles)
                self._categories = {category.slug: category for category in categories}
        return self._categories

    def get_category_by_slug(
        self,
        slug: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = ASSET_SORT[0],
        sort_dir: str = ASSET_SORT[1]
    ) -> Optional[Category]:
        """
        Return a category with a page of its videos.

        The category count is resolved first; videos are then fetched by
        the humanized slug as `Categories` metadata value, hidden assets
        excluded. The first page is kept on the cached category. Other
        pages are fetched on every call and returned on a copy of the
        category, leaving the cached first page untouched.

        Args:
            slug: Category slug.
            start: Offset of the first video.
            limit: Page size.
            sort_by: Any asset property (date_start by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            The category, None if the API failed.
        """
        if self.get_category_total_count_by_slug(slug) is None:
            return None
        category = self._categories[slug]

        if not category.total_count or (category.videos is not None and start == 0):
            return category

        assets = self.asset_provider.fetch_assets_by_metadata(
            CATEGORIES_METANAME, humanize(slug), start, limit, sort_by, sort_dir
        )
        if 'failure' in assets:
            return None
        assets = self.asset_provider.filter_assets_by_property(
            assets, HIDDEN_PROPERTY, HIDDEN_VALUE
        )
        count = int(assets.get('totalCount') or 0)
        videos = self._build_videos(assets.get('asset') or []) if count > 0 else {}

        if start > 0:
            category = Category(category.title, category.slug, category.id, category.total_count)
        category.set_videos(videos)
        return category

    def get_category_total_count_by_slug(self, slug: str) -> Optional[int]:
        """
        Return the number of videos of a category.

        Returns:
            The count, None if the API failed.
        """
        categories = self.get_categories()
        if categories is None:
            categories = self._categories = {}

        category = categories.get(slug)
        count = category.total_count if category else None
        if count is None:
            title = humanize(slug)
            assets = self.asset_provider.fetch_assets_by_metadata(
                CATEGORIES_METANAME, title, 0, 1
            )
            if 'failure' in assets:
                return None
            count = int(assets.get('totalCount') or 0)
            if category is None:
                category = categories[slug] = Category(title, slug)
            category.set_total_count(count)

        return count

    def get_associated_data_by_slug(self, slug: str, vid: Union[int, str]) -> Optional[list]:
        """
        Return the programs associated to a video.

        Args:
            slug: Video slug, looked up in the session first.
            vid: Asset id or program UUID used on a cache miss.

        Returns:
            The associated programs, None if the video or its associations
            cannot be found.
        """
        video = self.cache.get(slug) or self.get_video_by_vid(vid)
        if video is None:
            return None

        if video.associated_data is None:
            data = self.asset_provider.fetch_associations_by_asset_id(video.id)
            if 'failure' in data:
                return None
            video.attach_associated_data(data)

        return video.associated_data

    def get_video_by_vid(self, vid: Union[int, str]) -> Optional[Video]:
        """
        Return a video from an asset id, a reference id or a program UUID.

        Returns:
            The video, None if not found.
        """
        video = self.cache.find_by_id(vid)
        if video:
            return video

        data = self.asset_provider.fetch_asset_by_vid(vid)
        if 'failure' in data:
            data = self.program_provider.fetch_by_program_uuid(str(vid))

        if 'assetid' not in data:
            return None
        return self.cache.set(Video(data))

    def get_videos_by_tag(
        self,
        tag: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = ASSET_SORT[0],
        sort_dir: str = ASSET_SORT[1]
    ) -> Optional[VideoMap]:
        """
        Return a page of videos tagged with `tag`, hidden assets excluded.

        The tag collection is fetched again whenever it holds no more
        videos than the page requires.

        Args:
            tag: Tag.
            start: Offset of the first video.
            limit: Page size.
            sort_by: Any asset property (date_start by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Videos keyed by slug, None if the API failed.
        """
        required = start + limit if start > 0 else limit
        collection = self.cache.tag(tag)

        if collection.videos is None or len(collection.videos) <= required:
            data = self.asset_provider.fetch_assets_by_tag(tag, start, limit, sort_by, sort_dir)
            if 'asset' not in data:
                return None
            data = self.asset_provider.filter_assets_by_property(
                data, HIDDEN_PROPERTY, HIDDEN_VALUE
            )
            count = int(data.get('totalCount') or 0)
            collection.videos = self._build_videos(data['asset']) if count > 0 else {}
            collection.total_count = count

        return collection.videos

    def get_total_count_by_tag(self, tag: str) -> int:
        """Return the number of videos tagged with `tag`."""
        collection = self.cache.tag(tag)
        if collection.total_count is None:
            data = self.asset_provider.fetch_assets_by_tag(tag, 0, 1)
            collection.total_count = int(data.get('totalCount') or 0)
        return collection.total_count

    def get_videos_by_project_uuid(
        self,
        project_uuid: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = PROGRAM_SORT[0],
        sort_dir: str = PROGRAM_SORT[1]
    ) -> Optional[VideoMap]:
        """
        Return a page of videos of a project.

        Args:
            project_uuid: Project UUID.
            start: Offset of the first program.
            limit: Page size.
            sort_by: Program property (sortnum by default).
            sort_dir: 'asc' or 'desc'.

        Returns:
            Videos keyed by slug, None if the API failed.
        """
        required = start + limit if start > 0 else limit
        collection = self.cache.project(project_uuid)

        if collection.videos is None or len(collection.videos) <= required:
            data = self.program_provider.fetch_by_project_uuid(
                project_uuid, start, limit, sort_by, sort_dir
            )
            if 'failure' in data:
                return None
            count = int(data.get('totalCount') or 0)
            collection.videos = self._build_videos(data['programs']) if count > 0 else {}
            collection.total_count = count

        return collection.videos

    def get_videos_by_program_search(
        self,
        search: str,
        project_uuid: str,
        start: int = 0,
        limit: int = DEFAULT_PAGE_SIZE,
        sort_by: str = '',
        sort_dir: str = 'desc'
    ) -> VideoMap:
        """
        Search videos in a project.

        Args:
            search: Search string (at least 3 characters to match anything).
            project_uuid: Project UUID.
            start: Offset of the first program.
            limit: Page size.
            sort_by: '' for relevance, or programTitle, assetTitle,
                programCreation, assetCreation.
            sort_dir: 'asc' or 'desc'.

        Returns:
            Matching videos keyed by slug.
        """
        data = self.program_search_provider.fetch_data(
            search, project_uuid, start, limit, sort_by, sort_dir
        )
        if data.get('totalCount', 0) > 0:
            return self._build_videos(data.get('programs') or [])
        return {}

    def get_total_count_by_program_search(self, search: str, project_uuid: str) -> int:
        """Return the number of videos matching a search in a project."""
        data = self.program_search_provider.fetch_data(search, project_uuid, 0, 1)
        return int(data.get('totalCount') or 0)

    def check_asset_status(self, asset_id: Union[int, str]) -> AssetStatus:
        """
        Return the processing status of an asset.

        The asset is read uncached, unpublished assets included.

        Args:
            asset_id: Asset id.

        Returns:
            The asset status.
        """
        data = self.asset_provider.fetch_asset_by_vid(
            asset_id, use_reference_id=False, use_cache=False, published_only=False
        )
        found = 'assetid' in data
        if not found:
            logger.info(f"Asset {asset_id} not found")
            return classify_asset_status(False, False, None, False, False)

        encoded = data.get('duration') is not None
        in_default_project = bool(data.get('associatedLinks'))
        metadatas = data.get('metadatas')
        if isinstance(metadatas, Mapping) and metadatas.get('in_default_project') is not None:
            flag = metadatas['in_default_project']
            in_default_project = flag is True or str(flag) == '1'

        thumbnails = self.thumbnail_provider.get(asset_id)
        has_thumbnail = None if thumbnails is None else bool(thumbnails)
        shared = bool(data.get('folders')) and not self.config.folder_id

        status = classify_asset_status(
            found=found,
            encoded=encoded,
            has_thumbnail=has_thumbnail,
            in_default_project=in_default_project and not shared,
            shared=shared,
        )
        logger.debug(f"Asset {asset_id} status: {status.value}")
        return status

    def get_download_url_by_vid(self, vid: Union[int, str]) -> Optional[str]:
        """Return the download URL of a video, None if not downloadable."""
        video = self.get_video_by_vid(vid)
        return video.download_url if video else None

    def get_download_info(self, vid: Union[int, str]) -> Optional[Dict[str, Any]]:
        """
        Return what a download link needs.

        Returns:
            ``{"slug": ..., "url": ...}``, None if the video cannot be downloaded.
        """
        video = self.get_video_by_vid(vid)
        if video and video.is_downloadable:
            return {'slug': video.slug, 'url': video.download_url}
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def acquire_user_token(self) -> Optional[str]:
        """
        Mint a fresh user token for a mutation.

        Returns:
            The token, None if the API refused the credentials.
        """
        self.user_token_provider.clear()
        token = self.user_token_provider.get()
        if token is None:
            logger.warning("Unable to acquire a Piksel user token")
        return token

    def has_associated_link_as_slug(self, asset_id: Union[int, str]) -> Optional[bool]:
        """
        Tell whether an asset already has associated links.

        Returns:
            True or False, None if the asset does not exist.
        """
        asset = self._fetch_current_asset(asset_id)
        if asset is None:
            return None
        return 'associatedLinks' in asset

    def set_associated_link_as_slug(self, asset_id: Union[int, str]) -> MutationResult:
        """
        Associate a link named after the asset slug to the asset.

        Assets that already have associated links are left unchanged.
        """
        workflow = 'set_associated_link_as_slug'
        asset = self._fetch_current_asset(asset_id)
        if asset is None:
            return self._not_found(workflow, asset_id)

        if asset.get('associatedLinks'):
            return MutationResult.ok(workflow, f'asset {asset_id} already has an associated link')

        video = Video(asset)
        return self._write(
            'POST',
            self.writer.services_url,
            'Ws_Asset_Associated_Link',
            {'assetId': asset_id, 'title': video.title, 'url': video.slug},
            workflow,
            f'a link ({video.slug}) has been associated successfully to asset {asset_id}',
        )

    def create_program_into_default_project(
        self,
        asset_id: Union[int, str],
        check_if_in: bool = True
    ) -> MutationResult:
        """
        Create a program of the asset in the default project.

        Args:
            asset_id: Asset id.
            check_if_in: Skip the write when the asset's
                `in_default_project` metadata says it is already placed,
                and set that metadata after a successful write.

        Returns:
            The mutation result.
        """
        workflow = 'create_program_into_default_project'
        asset = self._fetch_current_asset(asset_id)
        if asset is None:
            return self._not_found(workflow, asset_id)

        metadatas = asset.get('metadatas')
        metadatas = metadatas if isinstance(metadatas, Mapping) else {}
        has_flag = metadatas.get('in_default_project') is not None

        if check_if_in and has_flag and metadatas['in_default_project'] not in ('false', False):
            return MutationResult.ok(
                workflow,
                f'asset {asset_id} was already placed in default project '
                f'({self.config.search_uuid})',
            )

        result = self._write(
            'POST',
            self.writer.services_url,
            'ws_program',
            {'assetId': asset_id, 'projectUUID': self.config.search_uuid},
            workflow,
            f'asset {asset_id} has been placed in default project '
            f'({self.config.search_uuid}) successfully',
        )

        if result.success and check_if_in and has_flag:
            flagged = self.set_asset_properties(
                asset_id,
                {'request': {'ws_asset': {'metadatas': {'in_default_project': True}}}},
            )
            if not flagged.success:
                logger.warning(f"[{workflow}] {flagged.message}")

        return result

    def set_asset_properties(
        self,
        asset_id: Union[int, str],
        data: Optional[Mapping[str, Any]] = None
    ) -> MutationResult:
        """
        Update asset properties.

        Args:
            asset_id: Asset id.
            data: Request fragment merged into the write request, e.g.
                ``{"request": {"ws_asset": {"metadatas": {...}}}}``.

        Returns:
            The mutation result; no write is sent when `data` is empty.
        """
        workflow = 'set_asset_properties'
        asset = self._fetch_current_asset(asset_id)
        if asset is None:
            return self._not_found(workflow, asset_id)

        if not data:
            return MutationResult.ok(workflow, f'Asset ID {asset_id} remains not modified')

        return self._write(
            'PUT',
            self.writer.resource_url('ws_asset', 'put'),
            'ws_asset',
            {'assetid': asset['assetid']},
            workflow,
            f'asset {asset_id} has been modified successfully',
            extras=data,
        )

    def delete_program_into_default_project(self, asset_id: Union[int, str]) -> MutationResult:
        """
        Delete the program of the asset from the default project.

        Returns:
            The mutation result; success without a write when the asset has
            no program in the default project.
        """
        workflow = 'delete_program_into_default_project'
        program_uuid = self._default_project_program_uuid(asset_id)
        if program_uuid is None:
            return MutationResult.ok(
                workflow, f'asset {asset_id} has no program in the default project'
            )

        return self._write(
            'DELETE',
            self.writer.resource_url('ws_program', 'delete'),
            'ws_program',
            {'programUuid': program_uuid},
            workflow,
            f'program {program_uuid} has been deleted from the default project '
            f'({self.config.search_uuid}) successfully',
        )

    def unpublish(
        self,
        asset_id: Union[int, str],
        request_extras: Optional[Mapping[str, Any]] = None
    ) -> MutationResult:
        """
        Unpublish an asset.

        Args:
            asset_id: Asset id.
            request_extras: Request fragment merged into the write request.
                When given, the write is sent even if the asset is already
                unpublished.

        Returns:
            The mutation result.
        """
        workflow = 'unpublish'
        asset = self._fetch_current_asset(asset_id)
        if asset is None:
            return self._not_found(workflow, asset_id)

        if not Video(asset).is_published and not request_extras:
            return MutationResult.ok(workflow, f'Asset ID {asset_id} is already unpublished')

        return self._write(
            'PUT',
            self.writer.resource_url('ws_asset', 'put'),
            'ws_asset',
            {'assetid': asset['assetid'], 'isPublished': 0},
            workflow,
            f'asset {asset_id} has been unpublished successfully',
            extras=request_extras,
        )

    def publish_program_in_default_project(self, asset_id: Union[int, str]) -> MutationResult:
        """Publish the program of the asset in the default project."""
        workflow = 'publish_program_in_default_project'
        program_uuid = self._default_project_program_uuid(asset_id)
        if program_uuid is None:
            return MutationResult.failed(
                workflow, f'asset {asset_id} has no program in the default project'
            )

        return self._write(
            'PUT',
            self.writer.resource_url('ws_program', 'put'),
            'ws_program',
            {'programUUID': program_uuid, 'isPublished': 1},
            workflow,
            f'program {program_uuid} has been published in default project '
            f'({self.config.search_uuid}) successfully',
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _build_videos(self, payloads: Iterable[Any]) -> VideoMap:
        """Build videos keyed by slug, skipping payloads without asset id."""
        videos: VideoMap = {}
        for payload in payloads:
            if not isinstance(payload, Mapping):
                continue
            try:
                video = Video(payload)
            except ValueError as e:
                logger.warning(f"Skipping video payload: {e}")
                continue
            videos[video.slug] = video
        return videos

    def _fetch_current_asset(self, asset_id: Union[int, str]) -> Optional[Dict[str, Any]]:
        """Fetch an asset uncached, unpublished included; None if it does not exist."""
        asset = self.asset_provider.fetch_asset_by_vid(
            asset_id, use_reference_id=False, use_cache=False, published_only=False
        )
        return asset if 'assetid' in asset else None

    def _default_project_program_uuid(self, asset_id: Union[int, str]) -> Optional[str]:
        """UUID of the asset's program in the project titled after the client name."""
        data = self.asset_provider.fetch_associations_by_asset_id(asset_id)
        for program in data.get('associatedPrograms') or []:
            if program.get('project_title') == self.config.client_name:
                return program.get('uuid')
        return None

    @staticmethod
    def _not_found(workflow: str, asset_id: Union[int, str]) -> MutationResult:
        logger.warning(f"[{workflow}] Asset ID {asset_id} does not exist")
        return MutationResult.failed(workflow, f'Asset ID {asset_id} does not exist')

    def _write(
        self,
        method: str,
        url: str,
        resource: str,
        body: Mapping[str, Any],
        workflow: str,
        success_message: str,
        extras: Optional[Mapping[str, Any]] = None
    ) -> MutationResult:
        """Acquire a user token, then send an authenticated write."""
        user_token = self.acquire_user_token()
        if not user_token:
            return MutationResult.failed(workflow, 'unable to acquire a user token')

        request = self.writer.build_request(user_token, resource, body, extras)
        return self.writer.send(method, url, request, workflow, success_message)


# Short alias
Piksel = PikselClient
