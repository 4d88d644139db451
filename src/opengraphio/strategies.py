"""Sequential retry strategies over OpenGraph.io requests.

Each strategy is tried in order with its options layered over the caller's.
The first response carrying every ``requires`` path wins; attempts that fall
short (including failed requests) are kept in ``allRequests``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .config import ClientConfig, EffectiveConfig, RequestOptions, StrategyConfig, resolve
from .errors import TransportError
from .paths import satisfies

logger = logging.getLogger("opengraphio.strategies")

Fetcher = Callable[[str, EffectiveConfig], Awaitable[Any]]
StrategyInput = Union[StrategyConfig, Mapping[str, Any]]


@dataclass(frozen=True)
class AttemptRecord:
    requires: Tuple[str, ...]
    request: EffectiveConfig
    response: Any

    @property
    def failed(self) -> bool:
        return isinstance(self.response, TransportError)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requires": list(self.requires),
            "request": self.request.model_dump(by_alias=True, exclude_none=True),
            "response": _as_mapping(self.response),
        }


@dataclass
class StrategyOutcome:
    satisfied: bool
    response: Any
    trace: List[AttemptRecord] = field(default_factory=list)

    def envelope(self) -> Dict[str, Any]:
        result = _as_mapping(self.response)
        result["allRequests"] = list(self.trace)
        return result


def _as_mapping(response: Any) -> Dict[str, Any]:
    if isinstance(response, TransportError):
        return response.as_response()
    if isinstance(response, Mapping):
        return dict(response)
    return {"result": response}


def _coerce_strategy(strategy: StrategyInput) -> StrategyConfig:
    if isinstance(strategy, StrategyConfig):
        return strategy
    return StrategyConfig.model_validate(dict(strategy))


@dataclass
class StrategyRunner:
    fetch: Fetcher
    defaults: ClientConfig

    async def run(
        self,
        target: str,
        base: Optional[RequestOptions],
        strategies: Sequence[StrategyInput],
    ) -> StrategyOutcome:
        plan = [_coerce_strategy(strategy) for strategy in strategies]
        if not plan:
            raise ValueError("At least one retry strategy is required")

        trace: List[AttemptRecord] = []
        for index, strategy in enumerate(plan):
            effective = resolve(self.defaults, base, strategy)
            logger.debug(
                "Strategy %d/%d for %s requires=%s options=%s",
                index + 1,
                len(plan),
                target,
                list(strategy.requires),
                strategy.overrides(),
            )
            try:
                response = await self.fetch(target, effective)
            except TransportError as exc:
                logger.warning("Strategy %d for %s failed: %s", index + 1, target, exc)
                response = exc

            if not isinstance(response, TransportError) and satisfies(response, strategy.requires):
                logger.info("Strategy %d satisfied %s for %s", index + 1, list(strategy.requires), target)
                return StrategyOutcome(satisfied=True, response=response, trace=trace)

            trace.append(AttemptRecord(requires=strategy.requires, request=effective, response=response))

        logger.warning("All %d retry strategies exhausted for %s", len(plan), target)
        return StrategyOutcome(satisfied=False, response=trace[-1].response, trace=trace)


async def run_strategies(
    fetch: Fetcher,
    target: str,
    defaults: ClientConfig,
    base: Optional[RequestOptions],
    strategies: Sequence[StrategyInput],
) -> Dict[str, Any]:
    outcome = await StrategyRunner(fetch=fetch, defaults=defaults).run(target, base, strategies)
    return outcome.envelope()


__all__ = ["AttemptRecord", "Fetcher", "StrategyOutcome", "StrategyRunner", "run_strategies"]
