"""Demo Driver — последовательный прогон всех частей с выводом в консоль.

Порядок:
1. Math: factorial / is_prime / power (DomainError перехватывается и печатается)
2. Closures: counters, multipliers, accumulator
3. Higher-order: apply / filter_seq / fold / compose / Pipeline
4. Process: PID/PPID, адреса, aliasing

Все вычисленные значения собираются в DemoReport, который проверяется
против JSON контракта demo_report.json.
"""

import operator
from typing import Callable, Dict, List, Optional

from closurekit.closures import make_accumulator, make_counter, make_multiplier
from closurekit.core.contracts import validate_demo_report
from closurekit.core.domain import (
    ClosureSection,
    DemoReport,
    PipelineSection,
    ValidatorOutcome,
)
from closurekit.core.math import DomainError, factorial, is_prime, power
from closurekit.demo.config import (
    ClosureDemoConfig,
    DemoConfig,
    PipelineDemoConfig,
    ValidatorDemoConfig,
)
from closurekit.logger import logger
from closurekit.pipeline import Pipeline, apply, compose, filter_seq, fold
from closurekit.process import demonstrate_aliasing, explore_process

Printer = Callable[[str], None]


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _square(x: int) -> int:
    return x * x


# =============================================================================
# PART 1: MATH
# =============================================================================


def _call_validator(
    name: str,
    fn: Callable[..., int],
    args: List[int],
    out: Printer
) -> ValidatorOutcome:
    call = f"{name}({', '.join(str(a) for a in args)})"
    try:
        value = int(fn(*args))
    except DomainError as e:
        logger.warning("%s rejected: %s", call, e)
        out(f"{call} -> error: {e}")
        return ValidatorOutcome(name=name, args=args, error=str(e))

    out(f"{call} = {value}")
    return ValidatorOutcome(name=name, args=args, value=value)


def run_validators(config: ValidatorDemoConfig, out: Printer = print) -> List[ValidatorOutcome]:
    """Часть 1: валидаторы. Ошибки домена не прерывают прогон."""
    out("====== Part 1: Math Operations ======")
    outcomes = []
    for n in config.factorial_inputs:
        outcomes.append(_call_validator("factorial", factorial, [n], out))
    for n in config.prime_inputs:
        outcomes.append(_call_validator("is_prime", is_prime, [n], out))
    for base, exponent in config.power_inputs:
        outcomes.append(_call_validator("power", power, [base, exponent], out))
    out("")
    return outcomes


# =============================================================================
# PART 2: CLOSURES
# =============================================================================


def run_closures(config: ClosureDemoConfig, out: Printer = print) -> ClosureSection:
    """Часть 2: counters (чередование вызовов), multipliers, accumulator."""
    out("====== Part 2: Closures ======")

    counter_a = make_counter(config.counter_a_start)
    counter_b = make_counter(config.counter_b_start)
    counter_outputs: Dict[str, List[int]] = {"counter_a": [], "counter_b": []}
    for _ in range(config.counter_calls):
        counter_outputs["counter_a"].append(counter_a())
        counter_outputs["counter_b"].append(counter_b())
    for name, values in counter_outputs.items():
        out(f"{name}: {values}")

    multiplier_outputs: Dict[str, int] = {}
    for factor in config.multiplier_factors:
        multiplier = make_multiplier(factor)
        key = f"times_{factor}"
        multiplier_outputs[key] = multiplier(config.multiplier_input)
        out(f"{key}({config.multiplier_input}) = {multiplier_outputs[key]}")

    add, subtract, get = make_accumulator(config.accumulator_initial)
    trace = [get()]
    add(config.accumulator_add)
    trace.append(get())
    subtract(config.accumulator_subtract)
    trace.append(get())
    out(
        f"accumulator: initial={trace[0]}, "
        f"after add({config.accumulator_add})={trace[1]}, "
        f"after subtract({config.accumulator_subtract})={trace[2]}"
    )
    out("")

    return ClosureSection(
        counter_outputs=counter_outputs,
        multiplier_outputs=multiplier_outputs,
        accumulator_trace=trace,
        accumulator_final=get()
    )


# =============================================================================
# PART 3: HIGHER-ORDER FUNCTIONS
# =============================================================================


def run_pipeline(config: PipelineDemoConfig, out: Printer = print) -> PipelineSection:
    """Часть 3: map/filter/fold/compose и цепочка Pipeline."""
    out("====== Part 3: Higher-Order Functions ======")
    source = list(config.sequence)
    out(f"source: {source}")

    squared = apply(source, _square)
    out(f"squared: {squared}")

    evens = filter_seq(source, _is_even)
    out(f"evens: {evens}")

    total = fold(source, 0, operator.add)
    product = fold(source, 1, operator.mul)
    out(f"sum: {total}")
    out(f"product: {product}")

    add_n = config.compose_add
    factor = config.compose_factor
    h = compose(lambda x: x + add_n, lambda x: x * factor)
    composed = h(config.compose_input)
    out(f"compose(x+{add_n}, x*{factor})({config.compose_input}) = {composed}")

    chain = Pipeline().filter(_is_even, name="evens").map(_square, name="squared")
    result = chain.run(source)
    for stage_name, values in result.intermediates:
        out(f"pipeline [{stage_name}]: {list(values)}")
    out("")

    return PipelineSection(
        source=source,
        squared=squared,
        evens=evens,
        sum=total,
        product=product,
        composed=composed,
        chained_output=list(result.output)
    )


# =============================================================================
# DRIVER
# =============================================================================


def run_demo(config: Optional[DemoConfig] = None, out: Printer = print) -> DemoReport:
    """Прогон всех частей по порядку.

    Args:
        config: входы демо (default: DemoConfig())
        out: функция вывода строки (default: print)

    Returns:
        DemoReport, прошедший проверку контракта

    Raises:
        jsonschema.ValidationError: если отчёт нарушает demo_report.json
    """
    config = config or DemoConfig()
    logger.info("Starting demo run")

    validators = run_validators(config.validators, out)
    closures = run_closures(config.closures, out)
    pipeline = run_pipeline(config.pipeline, out)

    snapshot = explore_process(list(config.process_data), out)
    aliasing = demonstrate_aliasing(config.aliasing_value)
    out(
        f"aliasing: rebind keeps {aliasing.after_rebind}, "
        f"mutation shows {aliasing.after_mutate}"
    )

    report = DemoReport(
        validators=validators,
        closures=closures,
        pipeline=pipeline,
        process=snapshot,
        aliasing=aliasing
    )
    validate_demo_report(report.model_dump(mode="json"))
    logger.info("Demo run complete: %d validator calls", len(validators))
    return report


def main() -> int:
    """Console entry point."""
    run_demo()
    return 0
