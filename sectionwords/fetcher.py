"""
Page Fetcher - Single HTTP GET returning a tagged result
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import aiohttp

from .error_handler import ErrorType, FETCH_ERRORS, classify_error, classify_status, describe_error

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'SectionWords/1.0'
DEFAULT_TIMEOUT = 30.0


@dataclass
class FetchResult:
    """Result of fetching a single URL: either content or an error"""
    url: str
    content: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None
    status_code: Optional[int] = None
    response_time: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None


class PageFetcher:
    """
    Fetches page markup with one GET request.
    No retries: a failure is returned once as a FetchResult.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT,
                 user_agent: str = DEFAULT_USER_AGENT,
                 raise_for_status: bool = True,
                 log_manager=None):
        self.timeout = timeout
        self.user_agent = user_agent
        self.raise_for_status = raise_for_status
        self.log_manager = log_manager

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a single URL and return the result"""
        start_time = time.time()
        headers = {'User-Agent': self.user_agent}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        status_code = None
        logger.info(f"Fetching {url}")
        try:
            async with aiohttp.ClientSession(headers=headers, timeout=timeout) as session:
                async with session.get(url) as response:
                    status_code = response.status
                    if self.raise_for_status and not 200 <= response.status < 300:
                        result = FetchResult(
                            url=url,
                            error=f"HTTP {response.status} {response.reason or ''}".rstrip(),
                            error_type=classify_status(response.status),
                            status_code=response.status,
                            response_time=time.time() - start_time
                        )
                    else:
                        # Undecodable bytes become U+FFFD
                        content = await response.text(errors='replace')
                        result = FetchResult(
                            url=url,
                            content=content,
                            status_code=response.status,
                            response_time=time.time() - start_time
                        )
        except FETCH_ERRORS as e:
            error_type = classify_error(e)
            result = FetchResult(
                url=url,
                error=describe_error(e),
                error_type=error_type,
                status_code=getattr(e, 'status', status_code),
                response_time=time.time() - start_time
            )

        if result.ok:
            logger.info(f"Fetched {url} ({result.status_code}, {len(result.content)} chars, "
                        f"{result.response_time:.2f}s)")
        else:
            logger.warning(f"Fetch failed for {url}: {result.error_type.value} - {result.error}")

        if self.log_manager:
            self.log_manager.log_performance_event(
                'fetch_completed',
                url=url,
                status_code=result.status_code,
                response_time=round(result.response_time, 3),
                content_length=len(result.content) if result.content else 0,
                error_type=result.error_type.value if result.error_type else None
            )

        return result
