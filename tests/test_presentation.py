from postfeed.state import LoadStatus, Post
from postfeed.ui.presentation import (
    LIKED_COLOR,
    UNLIKED_COLOR,
    like_affordance,
    plan_rows,
    status_message,
)


def test_like_affordance_unliked():
    affordance = like_affordance(False)
    assert affordance.label == "Like"
    assert affordance.icon == "♡"
    assert affordance.color == UNLIKED_COLOR
    assert affordance.text == "♡ Like"


def test_like_affordance_liked():
    affordance = like_affordance(True)
    assert affordance.label == "Liked"
    assert affordance.icon == "♥"
    assert affordance.color == LIKED_COLOR


def test_status_message():
    assert status_message(LoadStatus.IDLE, 0) == ""
    assert status_message(LoadStatus.LOADING, 3) == "Chargement…"
    assert status_message(LoadStatus.LOADED, 2) == "2 post(s)"
    assert "exemple" in status_message(LoadStatus.FALLEN_BACK, 3)


def test_plan_rows_first_render_creates_everything():
    posts = [Post("a"), Post("b")]

    plan = plan_rows({}, posts)

    assert plan.create == (posts[0].id, posts[1].id)
    assert plan.update == ()
    assert plan.destroy == ()
    assert plan.order == (posts[0].id, posts[1].id)


def test_plan_rows_keeps_surviving_rows():
    a, b, c = Post("a"), Post("b"), Post("c")

    plan = plan_rows([a.id, b.id, c.id], [a, b, c])

    assert plan.create == ()
    assert plan.update == (a.id, b.id, c.id)
    assert plan.destroy == ()


def test_plan_rows_reload_replaces_rows():
    old = [Post("same"), Post("other")]
    new = [Post("same"), Post("other")]

    plan = plan_rows([p.id for p in old], new)

    assert plan.create == tuple(p.id for p in new)
    assert plan.update == ()
    assert set(plan.destroy) == {p.id for p in old}


def test_plan_rows_mixed_follows_sequence_order():
    kept, gone, fresh = Post("kept"), Post("gone"), Post("fresh")

    plan = plan_rows([gone.id, kept.id], [fresh, kept])

    assert plan.create == (fresh.id,)
    assert plan.update == (kept.id,)
    assert plan.destroy == (gone.id,)
    assert plan.order == (fresh.id, kept.id)
