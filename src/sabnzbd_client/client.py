"""SABnzbd API client.

Every operation is a declarative call site: a command name, a parameter
mapping built from its arguments, and the unwrap rule applied to the reply.
Remote-reported failures (``{"status": false, "error": ...}``) are returned,
not raised; inspect the result when it matters.
"""

import typing as t

import aiohttp

from .config.settings import DEFAULT_TIMEOUT, Settings
from .dispatch import CommandDispatcher
from .domain.endpoint import Endpoint
from .domain.exceptions import ValidationError
from .domain.params import IdentifierSet, Params, flag, join_identifiers
from .domain.priority import PriorityToken, priority_from_token
from .domain.responses import UnwrapRule
from .infrastructure.http import AiohttpClient, BaseHttpClient
from .infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

SortField = t.Literal["avg_age", "name", "size"]
SortDirection = t.Literal["asc", "desc"]


class SABnzbdClient:
    """Typed, awaitable access to one SABnzbd instance.

    The client keeps no queue state; it only holds the endpoint and the HTTP
    transport. Concurrent calls are independent.

    Usage:
        async with SABnzbdClient("http://localhost:8080", api_key) as sab:
            queue = await sab.queue(limit=10)
            await sab.pause_job(queue["slots"][0]["nzo_id"])

    Or with an existing session, which is borrowed and left open:
        async with aiohttp.ClientSession() as session:
            sab = SABnzbdClient(url, api_key, session=session)
            version = await sab.version()
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        *,
        session: aiohttp.ClientSession | None = None,
        http_client: BaseHttpClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the client.

        Args:
            url: SABnzbd base URL. ``/sabnzbd/api`` is appended when missing.
            api_key: SABnzbd API key.
            session: aiohttp session to borrow. Ignored if ``http_client``
                is given.
            http_client: Transport to use instead of an AiohttpClient.
            timeout: Seconds a single command may take in total.
            logger: Logger passed to the dispatcher.
        """
        self.endpoint = Endpoint(url=url, api_key=api_key)
        self.logger = logger
        self._dispatcher = CommandDispatcher(
            self.endpoint,
            http_client=http_client or AiohttpClient(session=session),
            timeout=timeout,
            logger=logger,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        session: aiohttp.ClientSession | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> "SABnzbdClient":
        """Build a client from Settings (``SABNZBD_URL``, ``SABNZBD_API_KEY``).

        Raises:
            ValidationError: If the URL or API key is not configured.
        """
        if not settings.url or not settings.api_key:
            raise ValidationError(
                "Both url and api_key must be configured to create a client"
            )
        return cls(
            settings.url,
            settings.api_key,
            session=session,
            timeout=settings.timeout,
            logger=logger,
        )

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    @property
    def url(self) -> str:
        return self.endpoint.url

    async def open(self) -> None:
        await self._dispatcher.open()

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> "SABnzbdClient":
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()

    async def cmd(self, command: str, params: Params | None = None) -> t.Any:
        """Run any API command and return the raw decoded body."""
        return await self._dispatcher.execute(command, params)

    async def _call(
        self, command: str, rule: UnwrapRule, params: Params | None = None
    ) -> t.Any:
        return rule.apply(await self._dispatcher.execute(command, params))

    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------
    async def version(self) -> t.Any:
        """Return the SABnzbd version string."""
        return await self._call("version", UnwrapRule.VERSION)

    # ------------------------------------------------------------------
    # Queue
    # ------------------------------------------------------------------
    async def queue(
        self,
        start: int | None = None,
        limit: int | None = None,
        search: str | None = None,
    ) -> t.Any:
        """Return the queue object (slots, speed, paused state, ...)."""
        return await self._call(
            "queue",
            UnwrapRule.QUEUE,
            {"start": start, "limit": limit, "search": search},
        )

    async def pause_queue(self, minutes: int | None = None) -> t.Any:
        """Pause the whole queue, indefinitely or for ``minutes``."""
        if minutes:
            return await self._call(
                "config", UnwrapRule.STATUS, {"name": "set_pause", "value": minutes}
            )
        return await self._call("pause", UnwrapRule.STATUS)

    async def resume_queue(self) -> t.Any:
        return await self._call("resume", UnwrapRule.STATUS)

    async def pause_job(self, nzo_id: str) -> t.Any:
        return await self._call(
            "queue", UnwrapRule.STATUS, {"name": "pause", "value": nzo_id}
        )

    async def resume_job(self, nzo_id: str) -> t.Any:
        return await self._call(
            "queue", UnwrapRule.STATUS, {"name": "resume", "value": nzo_id}
        )

    async def delete_jobs(
        self, nzo_ids: IdentifierSet, delete_files: bool | None = None
    ) -> t.Any:
        """Delete one or more jobs.

        Args:
            nzo_ids: A job id, a comma separated string of ids, or a list.
            delete_files: Also remove downloaded files. ``del_files`` is only
                sent when this is truthy.

        Raises:
            InvalidIdentifierError: If ``nzo_ids`` is not a string or a
                list/tuple of strings.
        """
        return await self._call(
            "queue",
            UnwrapRule.STATUS,
            {
                "name": "delete",
                "value": join_identifiers(nzo_ids),
                "del_files": flag(delete_files),
            },
        )

    async def delete_all_jobs(self, delete_files: bool | None = None) -> t.Any:
        return await self._call(
            "queue",
            UnwrapRule.STATUS,
            {"name": "delete", "value": "all", "del_files": flag(delete_files)},
        )

    async def purge_queue(
        self, search: str | None = None, delete_files: bool | None = None
    ) -> t.Any:
        """Delete every queued job, or only those matching ``search``."""
        return await self._call(
            "queue",
            UnwrapRule.STATUS,
            {"name": "purge", "search": search, "del_files": flag(delete_files)},
        )

    async def move_job(self, nzo_id: str, target: str | int) -> t.Any:
        """Move a job in the queue.

        ``target`` is either another job id, in which case ``nzo_id`` is
        placed above it, or a queue position where 0 is the top.
        """
        return await self._call(
            "switch", UnwrapRule.RAW, {"value": nzo_id, "value2": target}
        )

    async def change_job_category(self, nzo_id: str, category: str) -> t.Any:
        return await self._call(
            "change_cat", UnwrapRule.RAW, {"value": nzo_id, "value2": category}
        )

    async def change_job_script(self, nzo_id: str, script: str) -> t.Any:
        return await self._call(
            "change_script", UnwrapRule.RAW, {"value": nzo_id, "value2": script}
        )

    async def change_job_priority(self, nzo_id: str, priority: PriorityToken) -> t.Any:
        """Change a job's priority.

        ``priority`` may be a protocol number or one of ``paused``, ``low``,
        ``normal``, ``high``, ``forced``.
        """
        return await self._call(
            "queue",
            UnwrapRule.RAW,
            {
                "name": "priority",
                "value": nzo_id,
                "priority": priority_from_token(priority),
            },
        )

    async def change_job_post_processing(
        self, nzo_id: str, post_processing: int
    ) -> t.Any:
        """Change post-processing: -1 category default, 0 none, 1 +Repair,
        2 +Repair/Unpack, 3 +Repair/Unpack/Delete (see PostProcessing)."""
        return await self._call(
            "change_opts",
            UnwrapRule.RAW,
            {"value": nzo_id, "value2": post_processing},
        )

    async def get_job_files(self, nzo_id: str) -> t.Any:
        return await self._call("get_files", UnwrapRule.FILES, {"value": nzo_id})

    async def remove_job_file(self, nzo_id: str, nzf_id: str) -> t.Any:
        return await self._call(
            "queue",
            UnwrapRule.RAW,
            {"name": "delete_nzf", "value": nzo_id, "value2": nzf_id},
        )

    async def speed_limit(self, limit: int | str) -> t.Any:
        """Set the global speed limit.

        ``limit`` is a percentage (1-100) of the configured maximum, or an
        absolute speed such as ``"400K"`` or ``"1M"``.
        """
        return await self._call(
            "config", UnwrapRule.STATUS, {"name": "speedlimit", "value": limit}
        )

    async def on_queue_complete(self, action: str) -> t.Any:
        """Set the action run when the queue finishes.

        One of ``hibernate_pc``, ``standby_pc``, ``shutdown_program``, or a
        script name prefixed with ``script_``.
        """
        return await self._call(
            "change_complete_action", UnwrapRule.STATUS, {"value": action}
        )

    async def sort_queue(
        self, field: SortField, direction: SortDirection | None = None
    ) -> t.Any:
        return await self._call(
            "queue",
            UnwrapRule.STATUS,
            {"name": "sort", "sort": field, "dir": direction or "asc"},
        )

    # ------------------------------------------------------------------
    # Adding downloads
    # ------------------------------------------------------------------
    async def add_by_url(
        self,
        url: str,
        nzbname: str | None = None,
        category: str | None = None,
        priority: PriorityToken = None,
        script: str | None = None,
        post_processing: int | None = None,
    ) -> t.Any:
        """Queue an NZB fetched by SABnzbd from ``url``.

        Returns the new job ids when reported, else the status.
        """
        return await self._add(
            "addurl", url, nzbname, category, priority, script, post_processing
        )

    async def add_by_location(
        self,
        local_location: str,
        nzbname: str | None = None,
        category: str | None = None,
        priority: PriorityToken = None,
        script: str | None = None,
        post_processing: int | None = None,
    ) -> t.Any:
        """Queue an NZB from a path on the SABnzbd host."""
        return await self._add(
            "addlocalfile",
            local_location,
            nzbname,
            category,
            priority,
            script,
            post_processing,
        )

    async def _add(
        self,
        command: str,
        name: str,
        nzbname: str | None,
        category: str | None,
        priority: PriorityToken,
        script: str | None,
        post_processing: int | None,
    ) -> t.Any:
        # priority is always sent; "not given" and "category default" are
        # the same value on the wire.
        return await self._call(
            command,
            UnwrapRule.NZO_IDS,
            {
                "name": name,
                "nzbname": nzbname,
                "cat": category,
                "priority": priority_from_token(priority),
                "script": script,
                "pp": post_processing,
            },
        )

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    async def history(
        self,
        start: int | None = None,
        limit: int | None = None,
        category: str | None = None,
        search: str | None = None,
        failed_only: bool | None = None,
    ) -> t.Any:
        return await self._call(
            "history",
            UnwrapRule.RAW,
            {
                "start": start,
                "limit": limit,
                "category": category,
                "search": search,
                "failed_only": flag(failed_only, absent=0),
            },
        )

    async def retry_all_history(self) -> t.Any:
        return await self._call("retry_all", UnwrapRule.RAW)

    async def delete_history(
        self, nzo_ids: IdentifierSet | None = None, delete_files: bool | None = None
    ) -> t.Any:
        """Delete history entries.

        Args:
            nzo_ids: ``all`` (the default), ``failed``, an id, or a list of ids.
            delete_files: Also remove files. Unlike queue deletion,
                ``del_files`` is always sent, as ``0`` when not set.
        """
        return await self._call(
            "history",
            UnwrapRule.RAW,
            {
                "name": "delete",
                "value": join_identifiers(nzo_ids, default="all"),
                "del_files": flag(delete_files, absent=0),
            },
        )
