"""
Async Kubo (go-ipfs) HTTP RPC client.

Implements the ContentStore protocol on top of the /api/v0 commands of a
running IPFS daemon:

- add:   multipart POST /api/v0/add (newline-delimited JSON responses)
- ls:    POST /api/v0/ls, with /api/v0/files/stat for file CIDs
- cat:   POST /api/v0/cat (raw byte stream)
- get:   POST /api/v0/get (tar stream)
"""
import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional
from urllib.parse import quote

import aiofiles
import aiohttp

from ..exceptions import LocalIOError, StoreLookupError
from ..logging import get_logger
from .config import StoreConfig
from .models import AddedEntry, AddOptions, ListEntry, UploadEntry

# UnixFS data types that list as directories (Directory, HAMTShard)
UNIXFS_DIRECTORY_TYPES = (1, 5)

DIRECTORY_CONTENT_TYPE = 'application/x-directory'
FILE_CONTENT_TYPE = 'application/octet-stream'


def _flag(value: bool) -> str:
    return 'true' if value else 'false'


def _int_or_none(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def local_failure(error: BaseException) -> Optional[LocalIOError]:
    """
    Find a LocalIOError behind a transport error.

    aiohttp wraps exceptions raised while writing a streamed request body,
    so a local file that vanished mid-upload arrives as a ClientError.
    """
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, LocalIOError):
            return error
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return None


def ipfs_path(cid: str) -> str:
    """Turn a bare CID into an /ipfs/ path; paths pass through unchanged."""
    cid = cid.strip()
    return cid if cid.startswith('/') else f'/ipfs/{cid}'


def parse_ls_links(payload: Dict[str, Any], cid: str) -> List[ListEntry]:
    """
    Convert an /api/v0/ls response into listing entries.

    Unnamed links are the raw blocks of a chunked file, not directory
    children, and are skipped.

    Args:
        payload: Decoded JSON response
        cid: CID that was listed

    Returns:
        One entry per named link
    """
    entries = []
    for obj in payload.get('Objects') or []:
        for link in obj.get('Links') or []:
            name = link.get('Name') or ''
            if not name:
                continue
            link_type = 'dir' if link.get('Type') in UNIXFS_DIRECTORY_TYPES else 'file'
            entries.append(ListEntry(
                name=name,
                path=f"{cid}/{name}",
                cid=link.get('Hash', ''),
                type=link_type,
                size=_int_or_none(link.get('Size'))
            ))
    return entries


class ProgressDeltas:
    """
    Converts cumulative per-file byte counts into per-event deltas.

    Kubo reports how many bytes of a given file have been read so far; the
    progress callback contract is one delta per event.
    """

    def __init__(self):
        self._seen: Dict[str, int] = {}

    def delta(self, unit: str, cumulative: int) -> int:
        """Bytes added for unit since its previous report (never negative)."""
        previous = self._seen.get(unit, 0)
        if cumulative <= previous:
            return 0
        self._seen[unit] = cumulative
        return cumulative - previous


class KuboContentStore:
    """
    Content store backed by a Kubo daemon's HTTP RPC API.

    Example:
        >>> async with KuboContentStore(StoreConfig()) as store:
        ...     for entry in await store.ls("bafy..."):
        ...         print(entry.name, entry.cid)
    """

    def __init__(self, config: Optional[StoreConfig] = None):
        """
        Initialize the client.

        Args:
            config: Store configuration (uses defaults if not provided)
        """
        self._config = config or StoreConfig.default()
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = get_logger('cidshell.store')

    @property
    def config(self) -> StoreConfig:
        """Get current configuration."""
        return self._config

    async def __aenter__(self) -> 'KuboContentStore':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(**self._config.get_session_kwargs())
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    @asynccontextmanager
    async def _post(
        self,
        command: str,
        params: Dict[str, str],
        data: Any = None,
        timeout: Optional[aiohttp.ClientTimeout] = None,
        cid: Optional[str] = None
    ):
        """
        POST an RPC command and yield the open response.

        Raises:
            StoreLookupError: On transport errors, timeouts or non-200 replies
        """
        session = await self._ensure_session()
        url = self._config.endpoint(command)
        kwargs: Dict[str, Any] = {'params': params}
        if data is not None:
            kwargs['data'] = data
        if timeout is not None:
            kwargs['timeout'] = timeout

        self._logger.debug(f"POST {command} {params}")
        try:
            async with session.post(url, **kwargs) as resp:
                if resp.status != 200:
                    raise await self._error_from_response(resp, command, cid)
                yield resp
        except asyncio.TimeoutError as e:
            raise StoreLookupError(f"{command}: request timed out", cid=cid) from e
        except aiohttp.ClientError as e:
            local = local_failure(e)
            if local is not None:
                raise local from None
            raise StoreLookupError(f"{command}: {e}", cid=cid) from e

    async def _error_from_response(
        self,
        resp: aiohttp.ClientResponse,
        command: str,
        cid: Optional[str]
    ) -> StoreLookupError:
        """Build an error from Kubo's {"Message", "Code", "Type"} body."""
        text = await resp.text()
        message = text.strip() or (resp.reason or f"HTTP {resp.status}")
        code = None
        try:
            body = json.loads(text)
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get('Message') or message
            code = body.get('Code')
        self._logger.debug(f"{command} failed with HTTP {resp.status}: {message}")
        return StoreLookupError(message, cid=cid, status=resp.status, code=code)

    async def _read_json(self, resp: aiohttp.ClientResponse, cid: Optional[str]) -> Dict[str, Any]:
        try:
            return await resp.json(content_type=None)
        except ValueError as e:
            raise StoreLookupError(f"Malformed response from store: {e}", cid=cid) from e

    def _decode_record(self, line: bytes) -> Dict[str, Any]:
        try:
            record = json.loads(line)
        except ValueError as e:
            raise StoreLookupError(f"Malformed add response: {e}") from e
        if record.get('Type') == 'error':
            raise StoreLookupError(record.get('Message', 'add failed'), code=record.get('Code'))
        return record

    async def _stream_file(self, entry: UploadEntry) -> AsyncIterator[bytes]:
        """Stream a local file in chunk_size reads."""
        try:
            async with aiofiles.open(entry.source, 'rb') as f:
                while True:
                    chunk = await f.read(self._config.chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except OSError as e:
            raise LocalIOError(f"Cannot read {entry.source}: {e}", path=str(entry.source)) from e

    def _build_multipart(self, entries: Iterable[UploadEntry]) -> aiohttp.MultipartWriter:
        """
        Build the multipart body for /api/v0/add.

        Entries must arrive depth-first with each directory before its
        children; file names are URL-encoded as Kubo expects.
        """
        writer = aiohttp.MultipartWriter('form-data')
        for entry in entries:
            if entry.is_directory:
                part = writer.append(b'', {'Content-Type': DIRECTORY_CONTENT_TYPE})
            else:
                part = writer.append(self._stream_file(entry), {'Content-Type': FILE_CONTENT_TYPE})
            part.set_content_disposition(
                'form-data',
                quote_fields=False,
                name='file',
                filename=quote(entry.path, safe='')
            )
        return writer

    async def add_all(
        self,
        entries: Iterable[UploadEntry],
        options: Optional[AddOptions] = None
    ) -> AsyncIterator[AddedEntry]:
        """
        Add entries and yield each confirmed {path, cid}.

        Progress records are forwarded to options.progress as deltas.
        """
        options = options or AddOptions()
        entries = list(entries)
        params = {
            'pin': _flag(options.pin),
            'wrap-with-directory': _flag(options.wrap_with_directory),
            'progress': _flag(options.progress is not None),
            'stream-channels': 'true',
        }
        timeout = aiohttp.ClientTimeout(total=options.timeout) if options.timeout else None
        deltas = ProgressDeltas()
        self._logger.info(f"Adding {len(entries)} entries to the store")

        async with self._post('add', params, data=self._build_multipart(entries), timeout=timeout) as resp:
            async for raw in resp.content:
                line = raw.strip()
                if not line:
                    continue
                record = self._decode_record(line)
                name = record.get('Name', '')
                if 'Hash' not in record:
                    if options.progress is not None and 'Bytes' in record:
                        delta = deltas.delta(name, int(record['Bytes']))
                        if delta:
                            options.progress(delta, name)
                    continue
                self._logger.debug(f"Added {name!r} as {record['Hash']}")
                yield AddedEntry(path=name, cid=record['Hash'], size=_int_or_none(record.get('Size')))

    async def add(self, entry: UploadEntry, options: Optional[AddOptions] = None) -> AddedEntry:
        """Add one entry and return the last (root) entry the store reports."""
        result = None
        async for added in self.add_all([entry], options):
            result = added
        if result is None:
            raise StoreLookupError(f"Store returned no CID for {entry.path}")
        return result

    async def stat(self, cid: str) -> Dict[str, Any]:
        """Return the /api/v0/files/stat record of a CID."""
        async with self._post('files/stat', {'arg': ipfs_path(cid)}, cid=cid) as resp:
            return await self._read_json(resp, cid)

    async def ls(self, cid: str) -> List[ListEntry]:
        """
        List a CID.

        Directories list their named children. A file lists as a single
        entry whose name and path are the queried CID; an empty directory
        lists as nothing.
        """
        params = {'arg': cid, 'resolve-type': 'true', 'size': 'true'}
        async with self._post('ls', params, cid=cid) as resp:
            payload = await self._read_json(resp, cid)

        entries = parse_ls_links(payload, cid)
        if entries:
            return entries

        stat = await self.stat(cid)
        if stat.get('Type') == 'file':
            return [ListEntry(
                name=cid,
                path=cid,
                cid=stat.get('Hash') or cid,
                type='file',
                size=_int_or_none(stat.get('Size'))
            )]
        return []

    async def cat(self, cid: str) -> AsyncIterator[bytes]:
        """Stream file content."""
        async with self._post('cat', {'arg': cid}, cid=cid) as resp:
            async for chunk in resp.content.iter_chunked(self._config.chunk_size):
                yield chunk

    async def get(self, cid: str) -> AsyncIterator[bytes]:
        """Stream the tar archive of a CID."""
        async with self._post('get', {'arg': cid, 'archive': 'true'}, cid=cid) as resp:
            async for chunk in resp.content.iter_chunked(self._config.chunk_size):
                yield chunk
