"""Concurrent dispatch rounds, per-round boards and result isolation."""
from __future__ import annotations

import asyncio
import threading
from typing import List

import pytest

from cognate_providers.base.models import AdapterOutcome, ResultStatus
from cognate_providers.dispatch import Dispatcher, ResultBoard
from cognate_providers.persistence.sqlite import SqliteHistoryStore
from cognate_providers.tests.utils import (
    ScriptedAdapter,
    StaticResolver,
    assert_true,
    make_attachment,
    make_spec,
    register_adapters,
)

ALL_KEYS = {"openai": "sk-o", "anthropic": "sk-a", "google": "g", "deepseek": "ds"}


class _GatedAdapter(ScriptedAdapter):
    """Waits on an event before returning, so tests control completion order."""

    def __init__(self, provider_id: str, gate: asyncio.Event, outcome=None) -> None:
        super().__init__(provider_id, outcome)
        self.gate = gate
        self.entered = asyncio.Event()

    async def call(self, provider, prompt, credential, attachments=None):
        self.entered.set()
        await self.gate.wait()
        return await super().call(provider, prompt, credential, attachments)


def _dispatcher(factory, adapters, keys=None, history=None) -> Dispatcher:
    register_adapters(factory, adapters)
    return Dispatcher(StaticResolver(ALL_KEYS if keys is None else keys), factory=factory, history=history)


@pytest.mark.asyncio
async def test_one_result_per_selected_provider(isolated_factory):
    adapters = {pid: ScriptedAdapter(pid) for pid in ("openai", "anthropic", "google")}
    dispatcher = _dispatcher(isolated_factory, adapters)
    specs = [make_spec("openai"), make_spec("anthropic"), make_spec("google"), make_spec("deepseek", selected=False)]

    results = await dispatcher.dispatch("Hello", specs)

    assert [r.provider_id for r in results] == ["openai", "anthropic", "google"]
    assert len({r.id for r in results}) == 3
    assert all(r.status is ResultStatus.SUCCESS for r in results)
    assert all(r.elapsed_ms >= 0 for r in results)


@pytest.mark.asyncio
async def test_failure_is_isolated_to_its_provider(isolated_factory):
    adapters = {
        "openai": ScriptedAdapter("openai", AdapterOutcome.failure("Rate limit reached")),
        "anthropic": ScriptedAdapter("anthropic"),
        "google": ScriptedAdapter("google", RuntimeError("adapter bug")),
    }
    dispatcher = _dispatcher(isolated_factory, adapters)

    results = await dispatcher.dispatch("Hello", [make_spec(p) for p in adapters])
    by_id = {r.provider_id: r for r in results}

    assert by_id["openai"].status is ResultStatus.ERROR
    assert by_id["openai"].error_message == "Rate limit reached"
    assert by_id["anthropic"].status is ResultStatus.SUCCESS
    assert by_id["anthropic"].content == "anthropic says hi"
    assert by_id["google"].error_message == "adapter bug"
    assert by_id["google"].elapsed_ms == 0


@pytest.mark.asyncio
async def test_missing_key_only_fails_that_provider(isolated_factory):
    adapters = {"openai": ScriptedAdapter("openai"), "anthropic": ScriptedAdapter("anthropic")}
    dispatcher = _dispatcher(isolated_factory, adapters, keys={"anthropic": "sk-a"})

    results = await dispatcher.dispatch("Hello", [make_spec("openai"), make_spec("anthropic")])

    assert results[0].error_message == "OpenAI API key is not set."
    assert results[1].status is ResultStatus.SUCCESS
    assert adapters["openai"].calls == []


@pytest.mark.asyncio
async def test_empty_prompt_is_a_noop(isolated_factory):
    adapter = ScriptedAdapter("openai")
    dispatcher = _dispatcher(isolated_factory, {"openai": adapter})
    await dispatcher.dispatch("first", [make_spec("openai")])
    previous = dispatcher.current

    assert await dispatcher.dispatch("", [make_spec("openai")]) == []
    assert dispatcher.current is previous
    assert len(adapter.calls) == 1


@pytest.mark.asyncio
async def test_whitespace_prompt_is_dispatched(isolated_factory):
    adapter = ScriptedAdapter("openai")
    dispatcher = _dispatcher(isolated_factory, {"openai": adapter})

    results = await dispatcher.dispatch("   ", [make_spec("openai")])

    assert [r.status for r in results] == [ResultStatus.SUCCESS]
    assert adapter.calls[0][1] == "   "


@pytest.mark.asyncio
async def test_empty_selection_is_a_noop(isolated_factory):
    dispatcher = _dispatcher(isolated_factory, {})
    assert await dispatcher.dispatch("Hello", [make_spec("openai", selected=False)]) == []
    assert dispatcher.current is None


@pytest.mark.asyncio
async def test_board_is_published_pending_before_calls_finish(isolated_factory):
    gate = asyncio.Event()
    adapters = {pid: _GatedAdapter(pid, gate) for pid in ("openai", "anthropic")}
    dispatcher = _dispatcher(isolated_factory, adapters)

    round_ = dispatcher.open_round("Hello", [make_spec("openai"), make_spec("anthropic")])
    assert dispatcher.current is round_.board
    assert [r.status for r in round_.board.snapshot()] == [ResultStatus.PENDING, ResultStatus.PENDING]

    task = asyncio.ensure_future(dispatcher.run_round(round_))
    await asyncio.sleep(0)
    assert not round_.board.complete
    gate.set()
    results = await task
    assert all(r.status is ResultStatus.SUCCESS for r in results)


@pytest.mark.asyncio
async def test_late_result_lands_on_its_own_round(isolated_factory):
    slow_gate = asyncio.Event()
    slow = _GatedAdapter("openai", slow_gate, AdapterOutcome.success("old answer", 5))
    dispatcher = _dispatcher(isolated_factory, {"openai": slow})

    first = dispatcher.open_round("first", [make_spec("openai")])
    first_task = asyncio.ensure_future(dispatcher.run_round(first))
    await slow.entered.wait()

    fast = ScriptedAdapter("openai", AdapterOutcome.success("new answer", 1))
    isolated_factory.register("openai", lambda: fast)
    second = await dispatcher.dispatch("second", [make_spec("openai")])

    slow_gate.set()
    first_results = await first_task

    assert dispatcher.current is not first.board
    assert second[0].content == "new answer"
    assert dispatcher.current.get("openai").content == "new answer"
    assert first_results[0].content == "old answer"
    assert first_results[0].id != second[0].id


@pytest.mark.asyncio
async def test_on_update_receives_snapshots(isolated_factory):
    adapters = {pid: ScriptedAdapter(pid) for pid in ("openai", "anthropic")}
    dispatcher = _dispatcher(isolated_factory, adapters)
    seen: List[List[str]] = []

    await dispatcher.dispatch(
        "Hello",
        [make_spec("openai"), make_spec("anthropic")],
        on_update=lambda snap: seen.append([r.status.value for r in snap]),
    )

    assert seen[0] == ["pending", "pending"]
    assert seen[-1] == ["success", "success"]
    assert len(seen) == 3


@pytest.mark.asyncio
async def test_stream_yields_until_all_terminal(isolated_factory):
    adapters = {pid: ScriptedAdapter(pid) for pid in ("openai", "anthropic")}
    dispatcher = _dispatcher(isolated_factory, adapters)

    snapshots = [s async for s in dispatcher.stream("Hello", [make_spec("openai"), make_spec("anthropic")])]

    assert all(r.status is ResultStatus.PENDING for r in snapshots[0])
    assert all(r.is_terminal for r in snapshots[-1])
    assert len(snapshots) == 3


@pytest.mark.asyncio
async def test_attachments_are_shared_by_every_branch(isolated_factory):
    adapters = {pid: ScriptedAdapter(pid) for pid in ("openai", "google")}
    dispatcher = _dispatcher(isolated_factory, adapters)
    attachment = make_attachment()

    await dispatcher.dispatch("Read", [make_spec("openai"), make_spec("google")], [attachment])

    assert adapters["openai"].calls[0][3] == [attachment]
    assert adapters["google"].calls[0][3] == [attachment]


@pytest.mark.asyncio
async def test_history_is_recorded_per_round(isolated_factory, db_path):
    history = SqliteHistoryStore(db_path)
    dispatcher = _dispatcher(isolated_factory, {"openai": ScriptedAdapter("openai")}, history=history)

    await dispatcher.dispatch("Hello", [make_spec("openai")], [make_attachment("a.pdf")])
    await dispatcher.dispatch("", [make_spec("openai")])

    (entry,) = history.list()
    assert_true(entry.text == "Hello", f"unexpected history text {entry.text!r}")
    assert entry.providers == ["openai"]
    assert entry.attachment_names == ["a.pdf"]


@pytest.mark.asyncio
async def test_history_failure_does_not_block_dispatch(isolated_factory):
    class _BrokenHistory:
        def add(self, *args, **kwargs):
            raise RuntimeError("disk full")

    dispatcher = _dispatcher(isolated_factory, {"openai": ScriptedAdapter("openai")}, history=_BrokenHistory())
    results = await dispatcher.dispatch("Hello", [make_spec("openai")])
    assert results[0].status is ResultStatus.SUCCESS


@pytest.mark.asyncio
async def test_history_write_runs_off_the_event_loop(isolated_factory):
    class _ThreadRecordingHistory:
        def __init__(self) -> None:
            self.threads: List[int] = []

        def add(self, text, providers, attachment_names=()):
            self.threads.append(threading.get_ident())

    history = _ThreadRecordingHistory()
    dispatcher = _dispatcher(isolated_factory, {"openai": ScriptedAdapter("openai")}, history=history)

    round_ = dispatcher.open_round("Hello", [make_spec("openai")])
    assert history.threads == []

    await dispatcher.run_round(round_)
    assert len(history.threads) == 1
    assert history.threads[0] != threading.get_ident()


def test_board_ignores_unknown_and_repeated_merges():
    board = ResultBoard(["openai", "anthropic", "openai"])
    assert len(board) == 2

    assert board.merge("mistral", AdapterOutcome.success("x", 1)) is None
    first = board.merge("openai", AdapterOutcome.success("first", 1))
    assert first.content == "first"
    assert board.merge("openai", AdapterOutcome.success("second", 1)) is None
    assert board.get("openai").content == "first"


def test_board_subscriber_errors_are_contained():
    board = ResultBoard(["openai"])
    received = []

    def _broken(_snapshot):
        raise RuntimeError("ui gone")

    board.subscribe(_broken)
    unsubscribe = board.subscribe(received.append, replay=False)
    board.merge("openai", AdapterOutcome.success("ok", 1))
    unsubscribe()

    assert len(received) == 1
    assert board.complete
