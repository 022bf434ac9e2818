"""Step definitions for path cleaning BDD scenarios."""

from __future__ import annotations

import dataclasses as dc

from pytest_bdd import given, parsers, then, when

from cleanpath import Borrowed, CleanedPath, Owned, clean_path_result


@dc.dataclass(slots=True)
class CleaningRun:
    """Results of cleaning a raw path once or twice."""

    first: CleanedPath
    second: CleanedPath | None = None


@given(parsers.parse('the raw path "{raw}"'), target_fixture="raw_path")
def raw_text_path(raw: str) -> str:
    """Provide a text path taken verbatim from the scenario."""
    return raw


@given("an empty raw path", target_fixture="raw_path")
def empty_raw_path() -> str:
    """Provide the empty path, which feature text cannot quote."""
    return ""


@given(parsers.parse('the raw byte path "{raw}"'), target_fixture="raw_path")
def raw_byte_path(raw: str) -> bytes:
    """Provide a byte path encoded from the scenario text."""
    return raw.encode()


@when("the path is cleaned", target_fixture="run")
def clean_once(raw_path: str | bytes) -> CleaningRun:
    """Clean the raw path."""
    return CleaningRun(first=clean_path_result(raw_path))


@when("the path is cleaned twice", target_fixture="run")
def clean_twice(raw_path: str | bytes) -> CleaningRun:
    """Clean the raw path, then clean the result again."""
    first = clean_path_result(raw_path)
    return CleaningRun(first=first, second=clean_path_result(first.value))


@then(parsers.parse('the cleaned path is "{cleaned}"'))
def cleaned_path_is(run: CleaningRun, cleaned: str) -> None:
    """Assert the cleaned text path matches *cleaned*."""
    assert run.first.value == cleaned


@then(parsers.parse('the cleaned path is the bytes "{cleaned}"'))
def cleaned_path_is_bytes(run: CleaningRun, cleaned: str) -> None:
    """Assert the cleaned byte path matches the encoded *cleaned*."""
    assert run.first.value == cleaned.encode()


@then("the result borrows from the input")
def result_is_borrowed(run: CleaningRun, raw_path: str | bytes) -> None:
    """Assert no scratch buffer was needed."""
    assert isinstance(run.first, Borrowed)
    assert run.first.source is raw_path


@then("the result owns its data")
def result_is_owned(run: CleaningRun) -> None:
    """Assert the scratch buffer was materialized."""
    assert isinstance(run.first, Owned)


@then("both cleanings agree")
def cleanings_agree(run: CleaningRun) -> None:
    """Assert cleaning is idempotent and the second pass borrows."""
    assert run.second is not None
    assert run.second == run.first
    assert run.second.is_borrowed
