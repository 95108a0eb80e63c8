"""Run the settings API and open the console in a browser."""
import threading
import time
import webbrowser

import uvicorn

from main import app, settings


def open_console(url: str, delay: float = 1.5):
    time.sleep(delay)  # Wait for the server to bind
    webbrowser.open(url)


if __name__ == "__main__":
    console_url = f"http://localhost:{settings.PORT}/"
    threading.Thread(target=open_console, args=(console_url,), daemon=True).start()

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
