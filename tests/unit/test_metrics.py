"""Tests for Prometheus metrics."""

import pytest
from prometheus_client import REGISTRY

from chimprompt.monitoring import metrics_collector
from chimprompt.store import SnippetDraft, SnippetKind


def sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.unit
def test_clause_counters(assembler):
    appended = sample("chimprompt_clauses_total", keyword="in", status="appended")
    replaced = sample("chimprompt_clauses_total", keyword="in", status="replaced")

    assembler.append_or_replace("in", "swift")
    assembler.append_or_replace("in", "kotlin")

    assert sample("chimprompt_clauses_total", keyword="in", status="appended") == appended + 1
    assert sample("chimprompt_clauses_total", keyword="in", status="replaced") == replaced + 1


@pytest.mark.unit
def test_error_counter(assembler):
    before = sample("chimprompt_errors_total", error_type="unknown_keyword", component="assembler")
    assembler.append_or_replace("teleport", "mars")
    after = sample("chimprompt_errors_total", error_type="unknown_keyword", component="assembler")

    assert after == before + 1


@pytest.mark.unit
def test_wizard_counters(session, wizard_answers):
    completions = sample("chimprompt_wizard_completions_total")
    rejected = sample("chimprompt_wizard_transitions_total", action="back", status="rejected")

    session.back()
    for answer in wizard_answers:
        session.advance(answer)

    assert sample("chimprompt_wizard_completions_total") == completions + 1
    assert sample("chimprompt_wizard_transitions_total", action="back", status="rejected") == rejected + 1


@pytest.mark.unit
def test_snippet_gauge(store):
    store.create(SnippetDraft(content="*mold* [home]", kind=SnippetKind.MOLD))
    assert sample("chimprompt_snippets", kind="mold") == 1


@pytest.mark.unit
def test_disabled_collector_records_nothing(assembler):
    before = sample("chimprompt_parses_total", status="success")
    metrics_collector.enabled = False
    try:
        assembler.load("*in* swift")
    finally:
        metrics_collector.enabled = True

    assert sample("chimprompt_parses_total", status="success") == before


@pytest.mark.unit
def test_exposition():
    output = metrics_collector.get_metrics().decode()
    assert "chimprompt_uptime_seconds" in output
