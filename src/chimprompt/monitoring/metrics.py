"""
Metrics Collection
Prometheus counters for prompt authoring activity
"""

import time

from prometheus_client import Counter, Gauge, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the authoring engine.
    """

    def __init__(self) -> None:
        # Clause edits
        self.clauses_total = Counter(
            "chimprompt_clauses_total",
            "Clause append/replace attempts",
            ["keyword", "status"],
        )

        # Parsing
        self.parses_total = Counter(
            "chimprompt_parses_total",
            "Prompt parse attempts",
            ["status"],
        )

        # Wizard
        self.wizard_transitions_total = Counter(
            "chimprompt_wizard_transitions_total",
            "Wizard transitions",
            ["action", "status"],
        )
        self.wizard_completions_total = Counter(
            "chimprompt_wizard_completions_total",
            "Wizard sessions that produced a prompt",
        )

        # Saved snippets
        self.snippets = Gauge(
            "chimprompt_snippets",
            "Saved snippets currently stored",
            ["kind"],
        )

        # Errors
        self.errors_total = Counter(
            "chimprompt_errors_total",
            "Total number of errors",
            ["error_type", "component"],
        )

        self.uptime = Gauge(
            "chimprompt_uptime_seconds",
            "Engine uptime in seconds",
        )
        self.start_time = time.time()
        self.enabled = True

    def record_clause(self, keyword: str, status: str) -> None:
        """Record a clause append/replace attempt."""
        if self.enabled:
            self.clauses_total.labels(keyword=keyword, status=status).inc()

    def record_parse(self, status: str) -> None:
        """Record a parse attempt."""
        if self.enabled:
            self.parses_total.labels(status=status).inc()

    def record_transition(self, action: str, status: str) -> None:
        """Record a wizard transition."""
        if self.enabled:
            self.wizard_transitions_total.labels(action=action, status=status).inc()

    def record_completion(self) -> None:
        """Record a completed wizard session."""
        if self.enabled:
            self.wizard_completions_total.inc()

    def set_snippet_count(self, kind: str, count: int) -> None:
        """Set the stored snippet count for a kind."""
        if self.enabled:
            self.snippets.labels(kind=kind).set(count)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        if self.enabled:
            self.errors_total.labels(error_type=error_type, component=component).inc()

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.uptime.set(time.time() - self.start_time)
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
