from asyncevent.testing.fixtures import async_event, thermometer_config  # noqa: F401
