import os
from pathlib import Path
from typing import BinaryIO, Union

import anyio
from starlette.exceptions import HTTPException
from starlette.responses import FileResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Receive, Scope, Send

from spaserve.errors import FileReadError


class OpenedFileResponse(FileResponse):
    """FileResponse that streams from a handle opened before headers are sent."""

    chunk_size = 64 * 1024

    def __init__(self, file: BinaryIO, path: Union[str, os.PathLike]):
        super().__init__(path, stat_result=os.fstat(file.fileno()))
        self.file = file

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await send({"type": "http.response.start", "status": self.status_code, "headers": self.raw_headers})
            if scope["method"].upper() == "HEAD":
                await send({"type": "http.response.body", "body": b"", "more_body": False})
                return
            more_body = True
            while more_body:
                chunk = await anyio.to_thread.run_sync(self.file.read, self.chunk_size)
                more_body = len(chunk) == self.chunk_size
                await send({"type": "http.response.body", "body": chunk, "more_body": more_body})
        finally:
            self.file.close()
        if self.background is not None:
            await self.background()


async def open_file_response(path: Union[str, os.PathLike], request_path: str) -> OpenedFileResponse:
    """Open path for a response, raising FileReadError if it cannot be opened."""
    try:
        file = await anyio.to_thread.run_sync(open, path, "rb")
    except OSError as e:
        raise FileReadError(request_path, e.strerror or str(e)) from e
    return OpenedFileResponse(file, path)


class SPAStaticFiles(StaticFiles):
    """StaticFiles subclass that serves a fallback document for unknown paths.

    Files that exist under the static root are served as usual. Anything
    else gets the fallback document (normally the app's index.html) with
    status 200, leaving route handling to the frontend router.
    """

    def __init__(self, *, directory: Union[str, os.PathLike], fallback: Union[str, os.PathLike]):
        super().__init__(directory=directory, html=True, check_dir=True)
        self.fallback = Path(fallback)

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code == 404:
                return await self.fallback_response()
            if exc.status_code == 401:
                # stat() hit a permission error on a path under the root
                raise FileReadError(path, "permission denied") from exc
            raise

        # html mode returns 404.html as a response instead of raising
        if response.status_code == 404:
            return await self.fallback_response()

        if isinstance(response, FileResponse):
            return await open_file_response(response.path, path)
        return response

    async def fallback_response(self) -> Response:
        return await open_file_response(self.fallback, str(self.fallback))
