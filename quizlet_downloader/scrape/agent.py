"""Page agent and the request/response channel used to reach it."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..core.errors import (
    ChannelBusyError,
    CountMismatchError,
    EmptySetError,
    PageNotReadyError,
)
from .config import ScrapeConfig
from .dom import BrowserDocument, DomDocument
from .expander import AutoExpander
from .extractor import SetExtractor
from .fetcher import PageFetcher
from .models import (
    SCRAPE_ACTION,
    ScrapeFailure,
    ScrapeRequest,
    ScrapeResponse,
    ScrapeSuccess,
    parse_response,
)
from .selectors import load_selectors

logger = logging.getLogger(__name__)


class PageAgent:
    """Answers scrape requests for one open page."""

    def __init__(
        self,
        document: DomDocument,
        extractor: Optional[SetExtractor] = None,
        expander: Optional[AutoExpander] = None,
    ):
        self.document = document
        self.extractor = extractor or SetExtractor()
        self.expander = expander

    def on_load(self):
        """Run the best-effort expansion that precedes any request."""
        if self.expander is not None:
            self.expander.run_on_load(self.document)

    def handle(self, message: dict) -> Optional[dict]:
        """
        Handle one wire message.

        Args:
            message: ``{"action": "scrape_quizlet", "swap": bool}``

        Returns:
            Wire reply dict, or None for messages this agent does not handle
        """
        if not isinstance(message, dict) or message.get("action") != SCRAPE_ACTION:
            return None

        request = ScrapeRequest.model_validate(message)
        try:
            payload = self.extractor.extract(self.document, swap=request.swap)
        except CountMismatchError as e:
            return ScrapeFailure(message=e.message).to_wire()
        except EmptySetError:
            return ScrapeFailure(count=0).to_wire()

        return ScrapeSuccess(payload=payload).model_dump()


class PageChannel:
    """Typed request/response link to a PageAgent.

    Only one exchange may be in flight. The reply crosses the boundary as a
    plain dict and is re-parsed, so the caller never shares objects with the
    agent.
    """

    def __init__(self, agent: Optional[PageAgent]):
        self._agent = agent
        self._in_flight = False

    @property
    def busy(self) -> bool:
        return self._in_flight

    def send(self, request: ScrapeRequest) -> ScrapeResponse:
        """
        Send a scrape request and wait for the reply.

        Raises:
            ChannelBusyError: Another request is still in flight
            PageNotReadyError: The agent could not be reached or did not answer
        """
        if self._in_flight:
            raise ChannelBusyError()
        if self._agent is None:
            raise PageNotReadyError("no page agent attached")

        self._in_flight = True
        try:
            reply = self._agent.handle(request.model_dump())
        except Exception as e:
            logger.error(f"Page agent failed: {e}")
            raise PageNotReadyError(str(e)) from e
        finally:
            self._in_flight = False

        if reply is None:
            raise PageNotReadyError("page agent did not answer")
        return parse_response(reply)


def build_agent(document: DomDocument, config: ScrapeConfig) -> PageAgent:
    """Wire a PageAgent for ``document``; only live pages get auto-expansion."""
    selectors = load_selectors(config.selectors_file)
    expander = None
    if isinstance(document, BrowserDocument):
        expander = AutoExpander(
            selectors=selectors,
            threshold=config.expand_threshold,
            delay=config.expand_delay,
        )
    return PageAgent(document, extractor=SetExtractor(selectors), expander=expander)


@contextmanager
def open_channel(target: str, config: Optional[ScrapeConfig] = None) -> Iterator[PageChannel]:
    """
    Open ``target``, start its page agent and yield a channel to it.

    Raises:
        PageNotReadyError: The page could not be opened
    """
    config = config or ScrapeConfig.from_env()
    result = PageFetcher(config).open(target)
    if not result.success:
        raise PageNotReadyError(result.error)

    try:
        agent = build_agent(result.document, config)
        agent.on_load()
        yield PageChannel(agent)
    finally:
        result.close()
