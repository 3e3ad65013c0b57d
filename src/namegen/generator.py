"""Name generation service, the integration layer for namegen.

Owns the process-lifetime state and the per-request pipeline:

    startup:     word table -> contexts  ||  template text -> token tree
    per request: fresh random source -> category context -> evaluate -> record

The two startup tasks run concurrently and both must succeed; any failure
propagates out of the constructor. Afterwards the token tree and contexts
are read-only, so :meth:`NameGenerator.generate` may be called from any
number of threads at once. Each request gets its own random source.
"""

from __future__ import annotations

import functools
import hashlib
import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from namegen.config import NamegenConfig, validate_config
from namegen.entropy.registry import build_random_source
from namegen.exceptions import EvalError
from namegen.logging.logger import GenerationLogger
from namegen.logging.types import NameGenerationRecord
from namegen.sources.base import normalize_template_text
from namegen.sources.file import FileTextSource
from namegen.template.evaluator import evaluate
from namegen.template.parser import parse
from namegen.words.table import FEMALE, MALE, OTHER, build_contexts, resolve_category

if TYPE_CHECKING:
    from namegen.entropy.base import RandomSource
    from namegen.sources.base import TextSource
    from namegen.template.tokens import Token
    from namegen.words.table import ContextSet

logger = logging.getLogger("namegen")

RandomSourceFactory = Callable[[int], "RandomSource"]


@dataclass(frozen=True, slots=True)
class NameRequest:
    """One requested name.

    Attributes:
        id: Caller-chosen identifier, echoed in the result.
        category: Category label; unrecognized labels use the ``other`` context.
    """

    id: str
    category: str = OTHER


@dataclass(frozen=True, slots=True)
class NameResult:
    """Outcome of one request: exactly one of ``name`` and ``error`` is set."""

    id: str
    category: str
    name: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _template_hash(text: str) -> str:
    """First 16 hex characters of the SHA-256 digest of the template text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]


class NameGenerator:
    """Generates names from one template and one word table.

    Args:
        template_source: Provides the construction-language template.
        word_table_source: Provides the tab-separated word table.
        config: Settings; loaded from the environment when omitted.
        random_source_factory: Builds the random source for request stream
            *k*. Defaults to :func:`~namegen.entropy.registry.build_random_source`
            with the configured source type.

    Raises:
        ConfigValidationError: If *config* is unusable.
        TransportError: If either document cannot be retrieved.
        WordTableError: If the word table is malformed.
        ParseError: If the template is malformed.
    """

    def __init__(
        self,
        template_source: TextSource,
        word_table_source: TextSource,
        config: NamegenConfig | None = None,
        random_source_factory: RandomSourceFactory | None = None,
    ) -> None:
        self._config = config if config is not None else NamegenConfig()
        validate_config(self._config)
        if random_source_factory is None:
            random_source_factory = functools.partial(build_random_source, self._config)
        self._random_source_factory = random_source_factory
        self._logger = GenerationLogger(self._config)

        t_start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="namegen-init") as pool:
            contexts_future = pool.submit(self._prepare_contexts, word_table_source)
            template_future = pool.submit(self._prepare_template, template_source)
            self._contexts: ContextSet = contexts_future.result()
            self._token, self._template_hash = template_future.result()

        logger.info(
            "NameGenerator initialized: template=%s words=%s hash=%s source=%s in %.2fms",
            template_source.name,
            word_table_source.name,
            self._template_hash,
            self._config.random_source_type,
            (time.perf_counter() - t_start) * 1000.0,
        )

    @classmethod
    def from_config(cls, config: NamegenConfig | None = None) -> NameGenerator:
        """Build a generator reading both documents from the configured paths."""
        config = config if config is not None else NamegenConfig()
        return cls(
            FileTextSource(config.template_path),
            FileTextSource(config.word_table_path),
            config,
        )

    def _prepare_contexts(self, source: TextSource) -> ContextSet:
        return build_contexts(source.fetch(), self._config.substitutions)

    def _prepare_template(self, source: TextSource) -> tuple[Token, str]:
        text = normalize_template_text(source.fetch())
        return parse(text, max_depth=self._config.max_nesting_depth), _template_hash(text)

    @property
    def config(self) -> NamegenConfig:
        return self._config

    @property
    def token(self) -> Token:
        """The parsed template, shared by all requests."""
        return self._token

    @property
    def contexts(self) -> ContextSet:
        return self._contexts

    @property
    def generation_logger(self) -> GenerationLogger:
        return self._logger

    def generate_one(self, category: str | None = None, rng: RandomSource | None = None) -> str:
        """Evaluate the template once.

        Args:
            category: Category label selecting the context.
            rng: Random source to draw from; a fresh one is built when omitted.

        Returns:
            The generated name.

        Raises:
            EvalError: If evaluation fails.
        """
        if rng is None:
            rng = self._random_source_factory(0)
        return evaluate(self._token, rng, self._contexts.for_category(category))

    def default_requests(self, rng: RandomSource | None = None) -> list[NameRequest]:
        """Build the batch used when a caller sends no requests.

        Ids run "0", "1", ...; each category is drawn independently from the
        configured female/male ratios, the remainder being ``other``.
        """
        if rng is None:
            rng = self._random_source_factory(0)
        female_cut = self._config.default_female_ratio
        male_cut = female_cut + self._config.default_male_ratio
        requests = []
        for i in range(self._config.default_batch_size):
            roll = rng.get_random_float64()
            if roll < female_cut:
                category = FEMALE
            elif roll < male_cut:
                category = MALE
            else:
                category = OTHER
            requests.append(NameRequest(id=str(i), category=category))
        return requests

    def generate(self, requests: Iterable[NameRequest] | None = None) -> list[NameResult]:
        """Generate one name per request.

        Request *k* (1-based) draws from random stream *k*; stream 0 is used
        to draw the default batch when *requests* is empty or ``None``. An
        :class:`~namegen.exceptions.EvalError` fails only its own request.

        Args:
            requests: The batch to serve.

        Returns:
            Results in request order.
        """
        batch = list(requests) if requests is not None else []
        if not batch:
            logger.info("No requests supplied, generating default batch")
            batch = self.default_requests()

        return [
            self._generate_request(request, stream) for stream, request in enumerate(batch, 1)
        ]

    def _generate_request(self, request: NameRequest, stream: int) -> NameResult:
        rng = self._random_source_factory(stream)
        context_category = resolve_category(request.category)
        name: str | None = None
        error: str | None = None
        t_start = time.perf_counter_ns()
        try:
            name = self.generate_one(request.category, rng)
        except EvalError as exc:
            error = str(exc)
        finally:
            rng.close()
        elapsed_ms = (time.perf_counter_ns() - t_start) / 1_000_000

        self._logger.log_name(
            NameGenerationRecord(
                timestamp_ns=time.time_ns(),
                request_id=request.id,
                category=request.category,
                context_category=context_category,
                name=name,
                error=error,
                random_source=rng.name,
                elapsed_ms=elapsed_ms,
                template_hash=self._template_hash,
            )
        )
        return NameResult(id=request.id, category=request.category, name=name, error=error)
