"""Prometheus metrics for simulation outcomes and request latency"""

from prometheus_client import Counter, Histogram

from loan_simulator.domain.models import ComputationError, LoanResult, ValidationErrors

# Simulation metrics
simulation_counter = Counter(
    "loan_simulation_total",
    "Total loan simulations requested",
    ["outcome"],  # ok | validation_error | computation_error
)

validation_error_counter = Counter(
    "loan_validation_errors_total",
    "Rejected simulation fields",
    ["field"],  # principal | rate | months
)

installment_histogram = Histogram(
    "loan_installment_amount",
    "Installment value of successful simulations",
    buckets=[100, 500, 1_000, 5_000, 10_000, 50_000, 100_000, 1_000_000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def simulation_outcome(result: LoanResult | ValidationErrors | ComputationError) -> str:
    """Map a simulation result to its metrics label"""
    if isinstance(result, ValidationErrors):
        return "validation_error"
    if isinstance(result, ComputationError):
        return "computation_error"
    return "ok"


def record_simulation(result: LoanResult | ValidationErrors | ComputationError) -> str:
    """Record outcome metrics and return the outcome label"""
    outcome = simulation_outcome(result)
    simulation_counter.labels(outcome=outcome).inc()

    if isinstance(result, ValidationErrors):
        for field in result.fields:
            validation_error_counter.labels(field=field).inc()
    elif isinstance(result, LoanResult):
        installment_histogram.observe(result.installment)

    return outcome
