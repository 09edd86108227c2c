import uvicorn
from cookplan.api.api_run import app
from cookplan.events.Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS, log_listener
from cookplan.utilities.config import APP_HOST, APP_PORT
from cookplan.utilities.logging_setup import configure_logging


if __name__ == "__main__":
    configure_logging()
    for event_name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(event_name, log_listener)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
