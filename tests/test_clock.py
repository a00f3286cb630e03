from forgecore.clock import Clock


def _source(*times):
    values = iter(times)
    return lambda: next(values)


def test_update_before_start_does_nothing():
    clock = Clock(_source(5.0))
    clock.update()
    assert clock.elapsed == 0.0
    assert clock.start_time == 0.0


def test_update_measures_time_since_start():
    clock = Clock(_source(10.0, 12.5))
    clock.start()
    clock.update()
    assert clock.elapsed == 12.5 - 10.0


def test_stop_freezes_elapsed():
    clock = Clock(_source(10.0, 11.0, 20.0))
    clock.start()
    clock.update()
    clock.stop()
    clock.update()
    assert clock.elapsed == 11.0 - 10.0
    assert clock.start_time == 0.0


def test_start_resets_elapsed():
    clock = Clock(_source(1.0, 4.0, 6.0))
    clock.start()
    clock.update()
    clock.start()
    assert clock.elapsed == 0.0
    assert clock.start_time == 6.0


def test_default_time_source_moves_forward():
    clock = Clock()
    clock.start()
    clock.update()
    assert clock.elapsed >= 0.0
    assert clock.start_time > 0.0