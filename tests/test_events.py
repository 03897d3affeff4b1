import pygame as pg

from modality import InteractionEvent, InteractionKind, Modal, Slot, handle_event, set_config
from modality.events.pg import SlotHitTester, translate


def click(pos, button=1):
    return pg.event.Event(pg.MOUSEBUTTONUP, pos=pos, button=button)


def test_translate():
    kind, event = translate(click((10, 20)))
    assert kind is InteractionKind.Click
    assert event.type == "click"
    assert event.pos == (10, 20)
    assert event.source.button == 1

    assert translate(click((10, 20), button=3)) is None

    kind, event = translate(
        pg.event.Event(pg.FINGERUP, x=0.5, y=0.25, touch_id=0, finger_id=0),
        size=(800, 400),
    )
    assert kind is InteractionKind.TouchEnd
    assert event.pos == (400, 100)

    kind, event = translate(pg.event.Event(pg.KEYUP, key=pg.K_RETURN, mod=0))
    assert kind is InteractionKind.Press
    assert event.key == "Enter"
    assert translate(pg.event.Event(pg.KEYUP, key=pg.K_a, mod=0)) is None
    assert translate(pg.event.Event(pg.MOUSEMOTION, pos=(0, 0), rel=(0, 0), buttons=(0, 0, 0))) is None


def test_handle_event():
    event = InteractionEvent(0, "click")
    rv = handle_event(lambda e: e.type)(event)
    assert rv == "click"
    assert not event.propagation
    assert not event.cancelled

    event = InteractionEvent(0, "click")
    handle_event(lambda e: None, stop_propagation=False, prevent_default=True)(event)
    assert event.propagation
    assert event.cancelled

    set_config(stop_propagation=False)
    event = InteractionEvent(0, "click")
    handle_event(lambda e: None)(event)
    assert event.propagation

    # anything else is passed through untouched
    assert handle_event(lambda e: e * 2)(21) == 42


def make_modal():
    modal = Modal(
        render_main=lambda props: props,
        render_container=lambda props: props,
    )
    tester = SlotHitTester()
    tester.place(Slot.Container, (0, 0, 400, 300))
    tester.place(Slot.Main, pg.Rect(50, 50, 300, 200))
    return modal, tester


def test_hit():
    _, tester = make_modal()
    assert tester.hit((100, 100)) == [Slot.Main, Slot.Container]
    assert tester.hit((10, 10)) == [Slot.Container]
    assert tester.hit((500, 500)) == []


def test_one_click_toggles_once(make_recorder):
    clicks, seen, closed = make_recorder(), make_recorder(), make_recorder()
    modal, tester = make_modal()
    modal.update(default_visible=True, on_click=clicks, on_visible=seen, on_close=closed)
    # main stops the click before it reaches the container
    assert tester.dispatch(click((100, 100)), modal.slot_props) == [Slot.Main]
    assert not modal.visible
    assert len(clicks) == 1
    assert [options.visible for options in seen] == [False]
    assert len(closed) == 1


def test_click_bubbles_without_stop_propagation(make_recorder):
    set_config(stop_propagation=False)
    clicks = make_recorder()
    modal, tester = make_modal()
    modal.update(default_visible=True, on_click=clicks)
    assert tester.dispatch(click((100, 100)), modal.slot_props) == [
        Slot.Main,
        Slot.Container,
    ]
    assert modal.visible
    assert len(clicks) == 2


def test_click_outside_main(make_recorder):
    seen = make_recorder()
    modal, tester = make_modal()
    modal.update(default_visible=True, on_visible=seen, on_click=lambda: None)
    assert tester.dispatch(click((10, 10)), modal.slot_props) == [Slot.Container]
    assert not modal.visible
    assert seen[0].event.pos == (10, 10)


def test_press_goes_to_focus():
    modal, tester = make_modal()
    modal.update(default_visible=False, on_press=lambda: None)
    tester.focus = Slot.Main
    key = pg.event.Event(pg.KEYUP, key=pg.K_SPACE, mod=0)
    assert tester.dispatch(key, modal.slot_props) == [Slot.Main]
    assert modal.visible
    # clicks are not registered
    assert tester.dispatch(click((100, 100)), modal.slot_props) == []
