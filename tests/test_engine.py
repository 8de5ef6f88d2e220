import pytest

import config
from algorithms.step import StepKind
from engine import Recorder, Stepper, StepperState, compare, replay_values
from structures import LinkedList, UnknownOperationError


def recorded(key, container, **operands):
    rec = Recorder()
    rec.start(key, container, **operands)
    rec.run_to_completion()
    return rec


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_recorder_snapshots_every_step():
    arr = [3, 1, 2]
    rec = recorded("sorting.quick", arr)
    r = rec.recording
    assert r.initial == [3, 1, 2]
    assert len(r.snapshots) == len(r.steps) == rec.metrics.total_steps
    assert r.snapshots[-1] == [1, 2, 3]


def test_recorder_keeps_result():
    rec = recorded("array.search", [4, 5, 6], target=6)
    assert rec.recording.result == 2


def test_recorder_snapshots_node_containers_as_dicts():
    ll = LinkedList.from_values([1, 2])
    rec = recorded("linked_list.insert_head", ll, value=0)
    snap = rec.recording.snapshots[-1]
    assert snap["head"] == rec.recording.result
    assert rec.recording.initial["head"] == "node-0"


def test_metrics_count_compares_and_swaps():
    rec = recorded("sorting.bubble", [2, 1])
    m = rec.metrics
    assert m.operation_key == "sorting.bubble"
    assert m.family == "sorting"
    assert m.compares == 1
    assert m.swaps == 1
    assert m.rejected is False


def test_metrics_flag_rejected_runs():
    rec = recorded("stack.pop", [])
    assert rec.metrics.rejected is True
    assert rec.metrics.total_steps == 1


def test_unknown_operation():
    with pytest.raises(UnknownOperationError) as exc:
        Recorder().start("sorting.bogo", [1])
    assert str(exc.value) == "Unknown operation: sorting.bogo"


def test_unexpected_operand():
    with pytest.raises(TypeError):
        Recorder().start("stack.pop", [1], value=3)


def test_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export_is_plain_data():
    data = recorded("stack.push", [1], value=2).export()
    assert data["operation"] == "stack.push"
    assert data["steps"][1]["kind"] == "insert"
    assert data["steps"][1]["auxiliary"] == {"inserted": 2}
    assert data["metrics"]["total_steps"] == len(data["steps"])


def test_compare_names_the_cheaper_run():
    left = recorded("sorting.bubble", [1, 2, 3, 4])
    right = recorded("sorting.selection", [1, 2, 3, 4])
    result = compare(left, right)
    assert result.winner_compares == "Bubble Sort"
    assert result.winner_swaps == "tie"


def test_replay_before_first_step_is_initial():
    rec = recorded("sorting.bubble", [2, 1])
    assert replay_values([2, 1], rec.steps, -1) == [2, 1]
    with pytest.raises(IndexError):
        replay_values([2, 1], rec.steps, len(rec.steps))


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def loaded(values=(3, 1, 2), on_step=None):
    stepper = Stepper(on_step=on_step)
    stepper.load(recorded("sorting.quick", list(values)).recording)
    return stepper


def test_stepper_starts_paused_on_initial_state():
    stepper = loaded()
    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == -1
    assert stepper.current_step is None
    assert stepper.current_snapshot == [3, 1, 2]


def test_stepper_navigation():
    seen = []
    stepper = loaded(on_step=seen.append)
    assert stepper.next_step()
    assert stepper.current_step is stepper.recording.steps[0]
    assert stepper.prev_step()
    assert stepper.current_idx == -1
    assert not stepper.prev_step()

    assert stepper.goto_step(2)
    assert stepper.current_snapshot == stepper.recording.snapshots[2]
    assert not stepper.goto_step(stepper.total_steps)

    stepper.jump_to_end()
    assert stepper.is_finished
    assert stepper.current_snapshot == [1, 2, 3]
    assert stepper.progress == 1.0
    assert not stepper.next_step()

    stepper.rewind()
    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == -1
    assert seen[0] is None


def test_stepper_finishes_on_last_step():
    stepper = loaded(values=(1,))
    while stepper.next_step():
        pass
    assert stepper.state == StepperState.FINISHED
    assert stepper.current_step.kind == StepKind.SORTED


def test_stepper_play_and_tick():
    stepper = loaded()
    stepper.play()
    assert stepper.is_playing
    assert stepper.tick(now=0.0) is False     # not enough time elapsed
    later = stepper._last_tick + stepper.delay + 0.01
    assert stepper.tick(now=later) is True
    assert stepper.current_idx == 0
    assert stepper.tick(now=later) is False

    stepper.toggle_play()
    assert stepper.state == StepperState.PAUSED
    assert stepper.tick(now=later + 100) is False


def test_stepper_play_runs_to_finish():
    stepper = loaded()
    stepper.play()
    now = stepper._last_tick
    while stepper.is_playing:
        now += stepper.delay + 0.01
        stepper.tick(now=now)
    assert stepper.is_finished
    stepper.play()
    assert stepper.is_finished


def test_speed():
    stepper = Stepper()
    assert stepper.delay == config.BASE_DELAY_SECONDS
    stepper.set_speed("fast")
    assert stepper.delay == pytest.approx(config.BASE_DELAY_SECONDS / config.SPEED_PRESETS["fast"])
    stepper.set_speed_multiplier(10_000)
    assert stepper.delay == config.MIN_DELAY_SECONDS
    with pytest.raises(ValueError):
        stepper.set_speed_multiplier(0)


def test_reset_returns_to_idle():
    stepper = loaded()
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.total_steps == 0
    assert not stepper.next_step()
    stepper.play()
    assert stepper.state == StepperState.IDLE
