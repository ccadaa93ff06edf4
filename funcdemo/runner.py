"""
Example runner coordinator.

Runs one demonstration per functional feature (predicates, transforms,
consumers, suppliers, aggregation, stream pipelines, optional values and
date/time handling). Demos share no state: each builds its own literal
data, writes labelled lines to the output sink and returns a DemoResult.
A failing demo is recorded as FAILED and never stops the others.
"""

import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional, Sequence

import structlog

from .config.defaults import DEMO_ORDER, DefaultConfig, get_default_config
from .errors import UnknownDemoError
from .features.aggregation import calculate_count, calculate_mean, calculate_sum
from .features.functional import Consumer, Function, Predicate, Supplier
from .features.optional import Optional as OptionalValue
from .features.pipeline import Stream
from .logging.config import configure_logging, get_demo_logger, log_demo_result
from .models.results import DemoLine, DemoResult, DemoStatus
from .output.base import BaseOutputSink
from .output.stdout_sink import StdoutSink
from .utils.time import day_of_week, days_between, format_instant, get_reference_time, plus_days, to_zone

logger = structlog.get_logger(__name__)

Emit = Callable[[str, Any], None]

_UNSET = object()


def is_even(n: int) -> bool:
    return n % 2 == 0


def parity(n: int) -> str:
    return "even" if n % 2 == 0 else "odd"


def square(n: int) -> int:
    return n * n


class ExampleRunner:
    """
    Runs the feature demonstrations against an output sink.

    Every ``run_*_demo`` method accepts optional inputs; when an input is
    omitted the configured default is used. An explicitly passed empty
    sequence is used as-is.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 sink: Optional[BaseOutputSink] = None) -> None:
        self.config = config or get_default_config()
        if not structlog.is_configured():
            configure_logging(
                level=self.config.logging.level,
                format_json=self.config.logging.format_json,
            )
        self.inputs = self.config.inputs
        self.sink = sink or StdoutSink(
            format=self.config.output.format,
            show_headers=self.config.output.show_headers,
        )
        self.logger = logger
        self.demo_logger = get_demo_logger(__name__)

        self._demos: dict[str, Callable[[], DemoResult]] = {
            "predicate": self.run_predicate_demo,
            "transform": self.run_transform_demo,
            "consumer": self.run_consumer_demo,
            "supplier": self.run_supplier_demo,
            "aggregation": self.run_aggregation_demo,
            "filter_map_reduce": self.run_filter_map_reduce_demo,
            "statistics": self.run_statistics_demo,
            "optional": self.run_optional_demo,
            "datetime": self.run_datetime_demo,
        }

    @staticmethod
    def available_demos() -> list[str]:
        return list(DEMO_ORDER)

    def _execute(self, name: str, body: Callable[[Emit], Any]) -> DemoResult:
        """Run one demo body, streaming its lines to the sink."""
        lines: list[DemoLine] = []

        def emit(label: str, value: Any) -> None:
            line = DemoLine(label, value)
            self.sink.write_line(name, line)
            lines.append(line)

        start_time = time.perf_counter()
        try:
            self.sink.write_header(name)
            value = body(emit)
            result = DemoResult(name=name, status=DemoStatus.SUCCESS, lines=lines, value=value)
        except Exception as e:
            self.logger.error(
                "Demo raised an exception",
                demo_name=name,
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            result = DemoResult(
                name=name,
                status=DemoStatus.FAILED,
                lines=lines,
                error=f"{type(e).__name__}: {e}",
            )

        result.duration_ms = (time.perf_counter() - start_time) * 1000
        log_demo_result(
            self.demo_logger,
            demo_name=name,
            succeeded=result.succeeded,
            line_count=len(lines),
            duration_ms=result.duration_ms,
        )
        return result

    def run_predicate_demo(self, value: Optional[int] = None) -> DemoResult:
        """Evaluate a boolean test, alone and composed, over one number."""
        value = self.inputs.predicate_input if value is None else value

        def body(emit: Emit) -> bool:
            even = Predicate(is_even)
            positive = Predicate(lambda n: n > 0)
            large = Predicate(lambda n: n > 10)

            emit("input", value)
            result = even.test(value)
            emit("is even", result)
            emit("is even and positive", even.and_(positive).test(value))
            emit("is even or large", even.or_(large).test(value))
            emit("is odd", even.negate().test(value))
            return result

        return self._execute("predicate", body)

    def run_transform_demo(self, text: Optional[str] = None,
                           number: Optional[int] = None) -> DemoResult:
        """Apply single-argument transforms and their compositions."""
        text = self.inputs.transform_text if text is None else text
        number = self.inputs.transform_number if number is None else number

        def body(emit: Emit) -> dict[str, Any]:
            length = Function(len)
            squared = Function(square)

            results = {
                "length": length.apply(text),
                "square": squared.apply(number),
                "length then square": length.and_then(square).apply(text),
                "square after length": squared.compose(len).apply(text),
                "identity": Function.identity().apply(text),
            }
            emit("text", text)
            emit("number", number)
            for label, result in results.items():
                emit(label, result)
            return results

        return self._execute("transform", body)

    def run_consumer_demo(self, words: Optional[Sequence[str]] = None) -> DemoResult:
        """Run a chained side-effecting consumer over each element."""
        source = self.inputs.words if words is None else words

        def body(emit: Emit) -> dict[str, list]:
            words_list = list(source)
            upper: list[str] = []
            lengths: list[int] = []
            record = Consumer(lambda w: upper.append(w.upper())).and_then(
                lambda w: lengths.append(len(w))
            )

            Stream(words_list).for_each(record)

            emit("input", words_list)
            emit("upper-cased", upper)
            emit("lengths", lengths)
            return {"upper": upper, "lengths": lengths}

        return self._execute("consumer", body)

    def run_supplier_demo(self, calls: int = 3) -> DemoResult:
        """Invoke a plain and a memoized supplier repeatedly."""

        def body(emit: Emit) -> dict[str, Any]:
            counter = {"evaluations": 0}

            def next_ticket() -> int:
                counter["evaluations"] += 1
                return counter["evaluations"]

            plain = Supplier(next_ticket)
            plain_values = [plain.get() for _ in range(calls)]

            counter["evaluations"] = 0
            memoized = Supplier(next_ticket).memoize()
            memoized_values = [memoized.get() for _ in range(calls)]

            emit("supplier values", plain_values)
            emit("memoized values", memoized_values)
            emit("memoized evaluations", counter["evaluations"])
            return {
                "plain": plain_values,
                "memoized": memoized_values,
                "memoized_evaluations": counter["evaluations"],
            }

        return self._execute("supplier", body)

    def run_aggregation_demo(self, sequence: Optional[Iterable[int]] = None) -> DemoResult:
        """
        Compute sum, mean and count of a sequence.

        An empty sequence reports a mean of "no value" instead of failing.
        """
        source = self.inputs.numbers if sequence is None else sequence

        def body(emit: Emit) -> dict[str, Any]:
            values = list(source)
            totals = {
                "count": calculate_count(values),
                "sum": calculate_sum(values),
                "mean": calculate_mean(values),
            }
            emit("input", values)
            for label, result in totals.items():
                emit(label, result)
            return totals

        return self._execute("aggregation", body)

    def run_filter_map_reduce_demo(self, sequence: Optional[Iterable[int]] = None) -> DemoResult:
        """
        Filter evens, square them, reduce to a sum, and group the input by parity.

        Groups keep first-seen key order and input order within a group.
        """
        source = self.inputs.numbers if sequence is None else sequence

        def body(emit: Emit) -> dict[str, Any]:
            values = list(source)
            mapped = Stream(values).filter(is_even).map(square).to_list()
            reduced = Stream(mapped).reduce(lambda a, b: a + b, 0)
            groups = Stream(values).group_by(parity)

            emit("input", values)
            emit("even squares", mapped)
            emit("sum of even squares", reduced)
            emit("grouped by parity", groups)
            return {"mapped": mapped, "reduced": reduced, "groups": groups}

        return self._execute("filter_map_reduce", body)

    def run_statistics_demo(self, sequence: Optional[Iterable[int]] = None) -> DemoResult:
        """Collect summary statistics and a boolean partition in one pass each."""
        source = self.inputs.numbers if sequence is None else sequence

        def body(emit: Emit) -> dict[str, Any]:
            values = list(source)
            summary = Stream(values).summary()
            partition = Stream(values).partition_by(is_even)
            largest = Stream(values).reduce(max)

            emit("count", summary.count)
            emit("sum", summary.sum)
            emit("min", summary.min)
            emit("max", summary.max)
            emit("mean", summary.mean)
            emit("partitioned by even", partition)
            emit("largest", largest.or_else(None))
            emit("sorted words", Stream(self.inputs.words).sorted().join(", "))
            return {"summary": summary, "partition": partition}

        return self._execute("statistics", body)

    def run_optional_demo(self, maybe_value: Any = None, fallback: Any = _UNSET) -> DemoResult:
        """
        Resolve a possibly-absent value against a fallback.

        ``maybe_value`` of None is the absent case. The result is the value
        when present, otherwise the fallback; nothing is raised either way.
        An omitted fallback uses the configured one; an explicit None is kept.
        """
        if fallback is _UNSET:
            fallback = self.inputs.optional_fallback

        def body(emit: Emit) -> Any:
            candidate = OptionalValue.of_nullable(maybe_value)
            result = candidate.or_else(fallback)

            emit("input", maybe_value)
            emit("is present", candidate.is_present())
            emit("or else", result)
            emit("or else get", candidate.or_else_get(lambda: fallback))
            emit("mapped to text", candidate.map(str).map(str.upper).or_else(None))
            return result

        return self._execute("optional", body)

    def run_datetime_demo(self, reference: Optional[datetime] = None) -> DemoResult:
        """Date/time arithmetic and formatting anchored to a fixed instant."""
        source = self.inputs.reference_time if reference is None else reference

        def body(emit: Emit) -> dict[str, Any]:
            anchor = get_reference_time(source)
            new_year = datetime(anchor.year + 1, 1, 1, tzinfo=timezone.utc)
            results = {
                "reference": format_instant(anchor),
                "day of week": day_of_week(anchor),
                "plus 30 days": format_instant(plus_days(anchor, 30)),
                "days until new year": days_between(anchor, new_year),
                f"in {self.inputs.display_timezone}": format_instant(
                    to_zone(anchor, self.inputs.display_timezone)
                ),
            }
            for label, result in results.items():
                emit(label, result)
            return results

        return self._execute("datetime", body)

    def run_demo(self, name: str) -> DemoResult:
        """Run a single demo by name with its default inputs."""
        if name not in self._demos:
            raise UnknownDemoError(f"Unknown demo: {name}", demo_name=name)
        return self._demos[name]()

    def run_all(self, names: Optional[Iterable[str]] = None) -> list[DemoResult]:
        """
        Run demos in order.

        Args:
            names: Demo names to run, defaults to the configured enabled demos

        Returns:
            One DemoResult per demo that ran
        """
        selected = list(self.config.runner.enabled_demos if names is None else names)

        unknown = [name for name in selected if name not in self._demos]
        if unknown:
            raise UnknownDemoError(
                f"Unknown demo(s): {', '.join(unknown)}",
                demo_name=unknown[0],
            )

        self.logger.info("Running demos", demos=selected)

        results = []
        for name in selected:
            result = self._demos[name]()
            results.append(result)
            if not result.succeeded and self.config.runner.stop_on_error:
                self.logger.warning("Stopping after failed demo", demo_name=name)
                break

        failed = sum(1 for r in results if not r.succeeded)
        self.logger.info("Demo run finished", total=len(results), failed=failed)
        return results
