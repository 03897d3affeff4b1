"""
A confirm dialog drawn with pygame.
Click or press Space to open it, click outside the dialog box to close it.
While "loading" (toggle with L) nothing can open or close the dialog.
"""
import logging

import pygame as pg

from modality import Modal, Slot
from modality.events.pg import SlotHitTester

logging.basicConfig(level=logging.DEBUG)

W, H = 600, 400
BOX = pg.Rect(150, 100, 300, 200)


def render_main(props):
    def draw(surf: pg.Surface):
        pg.draw.rect(surf, "white", BOX)
        pg.draw.rect(surf, "gray20", BOX, 2)

    return draw


def render_container(props):
    def draw(surf: pg.Surface):
        surf.fill("gray30" if props.loading else "gray50")
        if props.visible:
            for child in props.children:
                child(surf)

    return draw


def main():
    pg.init()
    screen = pg.display.set_mode((W, H))
    clock = pg.time.Clock()
    modal = Modal(render_main=render_main, render_container=render_container)
    tester = SlotHitTester((W, H), focus=Slot.Container)
    tester.place(Slot.Container, screen.get_rect())
    loading = False
    running = True
    while running:
        draw = modal.update(
            default_visible=False,
            loading=loading,
            on_click=lambda e: logging.info(f"Clicked at {e.pos}"),
            on_press=lambda e: logging.info("Pressed"),
            on_close=lambda options: logging.info("Dialog closed"),
        )
        for event in pg.event.get():
            if event.type == pg.QUIT:
                running = False
            elif event.type == pg.KEYDOWN and event.key == pg.K_l:
                loading = not loading
            elif (
                event.type == pg.MOUSEBUTTONUP
                and modal.visible
                and BOX.collidepoint(event.pos)
            ):
                # the dialog box itself does not close the dialog
                continue
            else:
                tester.dispatch(event, modal.slot_props)
        draw(screen)
        pg.display.flip()
        clock.tick(30)
    pg.quit()


if __name__ == "__main__":
    main()
