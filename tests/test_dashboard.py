"""Tests for handler state machines and the startup hook."""

import asyncio

import httpx
import pytest

from adapters.page import Page
from conftest import DEFAULT_ROUTES, RATES_PAYLOAD, RecordingRegion, make_transport
from core.config import AppSettings
from core.domain.models import DogCard, OperationKey, RegionState
from core.errors import RequestFailed
from core.registry import OPERATIONS, get_descriptor
from core.services.dashboard import (
    DashboardHooks,
    OperationHandler,
    RenderSequencer,
    start_dashboard,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class GatedSource:
    """Source whose successive fetches block until their gate opens."""

    def __init__(self) -> None:
        self._pending: list[tuple[asyncio.Event, DogCard | Exception]] = []

    def queue(self, outcome: DogCard | Exception) -> asyncio.Event:
        gate = asyncio.Event()
        self._pending.append((gate, outcome))
        return gate

    async def fetch(self) -> DogCard:
        gate, outcome = self._pending.pop(0)
        await gate.wait()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _card(name: str) -> DogCard:
    return DogCard(image_url=f"https://images.dog.ceo/{name}.jpg", attribution="Dog CEO API")


def _handler(source, region, *, discard_stale=True) -> OperationHandler:
    return OperationHandler(
        descriptor=get_descriptor(OperationKey.DOG),
        source=source,
        region=region,
        sequencer=RenderSequencer(enabled=discard_stale),
    )


# ---------------------------------------------------------------------------
# Startup wiring
# ---------------------------------------------------------------------------

def test_startup_sets_every_placeholder(settings, transport):
    page = Page.for_operations(OPERATIONS)

    dashboard = start_dashboard(page, settings=settings, transport=transport)

    assert set(dashboard.handlers) == set(OperationKey)
    assert set(dashboard.buttons) == set(OperationKey)
    assert dashboard.warnings == []
    for descriptor in OPERATIONS:
        view = page.regions[descriptor.output_id].view
        assert view.state is RegionState.PLACEHOLDER
        assert view.message == descriptor.message


def test_missing_elements_warn_and_the_rest_still_wire(settings, transport):
    page = Page.for_operations(OPERATIONS)
    del page.regions["cat-output"]
    del page.buttons["joke-button"]
    received = []

    dashboard = start_dashboard(
        page,
        settings=settings,
        transport=transport,
        hooks=DashboardHooks(warning=received.append),
    )

    assert "Missing output element: cat-output" in dashboard.warnings
    assert "Missing button element: joke-button" in dashboard.warnings
    assert received == dashboard.warnings
    assert OperationKey.CAT not in dashboard.handlers
    assert OperationKey.JOKE not in dashboard.buttons
    assert OperationKey.JOKE in dashboard.handlers
    assert OperationKey.DOG in dashboard.buttons


# ---------------------------------------------------------------------------
# Handler state machine
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("descriptor", OPERATIONS, ids=lambda d: d.key.value)
async def test_click_shows_loading_before_the_network_completes(settings, descriptor):
    release = asyncio.Event()

    async def slow(request):
        await release.wait()
        return httpx.Response(503)

    transport = make_transport({request_host: slow for request_host in DEFAULT_ROUTES})
    page = Page.for_operations(OPERATIONS)
    start_dashboard(page, settings=settings, transport=transport)

    tasks = page.buttons[descriptor.button_id].click()
    await asyncio.sleep(0)

    view = page.regions[descriptor.output_id].view
    assert view.state is RegionState.LOADING
    assert view.message == descriptor.loading_message

    release.set()
    await asyncio.gather(*tasks)
    assert page.regions[descriptor.output_id].view.state is RegionState.ERROR


@pytest.mark.asyncio
async def test_every_operation_renders_a_card(settings, transport):
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.run()

    for descriptor in OPERATIONS:
        view = page.regions[descriptor.output_id].view
        assert view.state is RegionState.RENDERED, descriptor.key
        assert view.card.kind == descriptor.key.value


@pytest.mark.asyncio
async def test_failure_message_embeds_the_error(settings):
    transport = make_transport({"dog.ceo": httpx.Response(500)})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.trigger("dog")

    view = page.regions["dog-output"].view
    assert view.state is RegionState.ERROR
    assert view.message == "Could not load dog image. Request failed (500)"
    assert "❌ Could not load dog image. Request failed (500)" in page.regions["dog-output"].html


@pytest.mark.asyncio
async def test_missing_rate_is_reported(settings):
    rates = {"CAD": 1, "USD": 0.73}
    transport = make_transport({"open.er-api.com": {**RATES_PAYLOAD, "rates": rates}})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.trigger(OperationKey.EXCHANGE_RATES)

    view = page.regions["currency-output"].view
    assert view.message == "Could not load currency rates. Rates missing in response"


@pytest.mark.asyncio
async def test_field_access_errors_are_contained(settings):
    # `types` entries without a nested `type` mapping.
    payload = {"name": "x", "types": [{"slot": 1}], "sprites": {"a": 1}, "height": 1, "weight": 1}
    transport = make_transport({"pokeapi.co": payload})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.trigger("pokemon")

    view = page.regions["pokemon-output"].view
    assert view.state is RegionState.ERROR
    assert view.message.startswith("Could not load Pokémon.")


@pytest.mark.asyncio
async def test_failure_is_recoverable_by_retriggering(settings):
    responses = [httpx.Response(500), httpx.Response(200, json={"message": "https://d/1.jpg"})]
    transport = make_transport({"dog.ceo": lambda request: responses.pop(0)})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.trigger("dog")
    assert page.regions["dog-output"].view.state is RegionState.ERROR

    await dashboard.trigger("dog")
    view = page.regions["dog-output"].view
    assert view.state is RegionState.RENDERED
    assert view.card.image_url == "https://d/1.jpg"


@pytest.mark.asyncio
async def test_one_failing_handler_does_not_affect_others(settings):
    transport = make_transport({"api.thecatapi.com": httpx.Response(502)})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.run(["dog", "cat"])

    assert page.regions["cat-output"].view.state is RegionState.ERROR
    assert page.regions["dog-output"].view.state is RegionState.RENDERED


@pytest.mark.asyncio
async def test_redirect_loop_is_contained_in_its_region(settings):
    def loop(request):
        return httpx.Response(302, headers={"location": str(request.url)})

    transport = make_transport({"dog.ceo": loop})
    page = Page.for_operations(OPERATIONS)
    dashboard = start_dashboard(page, settings=settings, transport=transport)

    await dashboard.run(["dog", "cat"])

    assert page.regions["dog-output"].view.state is RegionState.ERROR
    assert page.regions["dog-output"].view.message.startswith("Could not load dog image.")
    assert page.regions["cat-output"].view.state is RegionState.RENDERED


# ---------------------------------------------------------------------------
# Overlapping invocations of the same handler
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_stale_result_is_discarded_when_guard_enabled():
    source = GatedSource()
    region = RecordingRegion()
    handler = _handler(source, region, discard_stale=True)
    first_gate = source.queue(_card("first"))
    second_gate = source.queue(_card("second"))

    first = asyncio.create_task(handler())
    await asyncio.sleep(0)
    second = asyncio.create_task(handler())
    await asyncio.sleep(0)

    second_gate.set()
    await second
    first_gate.set()
    await first

    assert region.current.state is RegionState.RENDERED
    assert region.current.card == _card("second")


@pytest.mark.asyncio
async def test_last_write_wins_when_guard_disabled():
    source = GatedSource()
    region = RecordingRegion()
    handler = _handler(source, region, discard_stale=False)
    first_gate = source.queue(_card("first"))
    second_gate = source.queue(_card("second"))

    first = asyncio.create_task(handler())
    await asyncio.sleep(0)
    second = asyncio.create_task(handler())
    await asyncio.sleep(0)

    second_gate.set()
    await second
    first_gate.set()
    await first

    # Complete, consistent result from one response; never a mixture.
    assert region.current.state is RegionState.RENDERED
    assert region.current.card == _card("first")


@pytest.mark.asyncio
async def test_stale_error_does_not_hide_newer_card():
    source = GatedSource()
    region = RecordingRegion()
    handler = _handler(source, region)
    first_gate = source.queue(RequestFailed(500))
    second_gate = source.queue(_card("second"))

    first = asyncio.create_task(handler())
    await asyncio.sleep(0)
    second = asyncio.create_task(handler())
    await asyncio.sleep(0)

    second_gate.set()
    await second
    first_gate.set()
    await first

    assert region.current.card == _card("second")


def test_guard_default_comes_from_settings():
    assert AppSettings(_env_file=None).discard_stale_renders is True
    assert AppSettings(_env_file=None, discard_stale_renders=False).discard_stale_renders is False


def test_sequencer_tracks_regions_independently():
    sequencer = RenderSequencer()
    dog = sequencer.begin("dog-output")
    cat = sequencer.begin("cat-output")

    assert sequencer.is_current("dog-output", dog)
    assert sequencer.is_current("cat-output", cat)

    newer_dog = sequencer.begin("dog-output")
    assert not sequencer.is_current("dog-output", dog)
    assert sequencer.is_current("dog-output", newer_dog)
