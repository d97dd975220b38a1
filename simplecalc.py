"""
SimpleCalc
Main application entry point: desktop window plus optional web portal
"""
import atexit
import os
import socket
import subprocess
import sys
import tkinter as tk

import config
from gui import SimpleCalcGUI

# Portal subprocess, None while it is not running
api_process = None


def get_local_ip():
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        # doesn't even have to be reachable
        s.connect(('10.255.255.255', 1))
        ip = s.getsockname()[0]
        s.close()
    except OSError:
        ip = '127.0.0.1'
    return ip


def portal_urls():
    """Addresses the portal answers on, as (label, url) pairs"""
    urls = [("This PC", f"http://localhost:{config.WEB_PORT}")]
    if config.WEB_HOST == '0.0.0.0':
        urls.append(("Your network", f"http://{get_local_ip()}:{config.WEB_PORT}"))
    return urls


def start_api_server():
    """Spawn api.py and announce it once it survives the startup window.

    Returns True when the portal is up. A process that exits during
    API_STARTUP_WAIT (port taken, missing Flask) is reported and dropped.
    """
    global api_process
    api_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'api.py')
    try:
        api_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return False

    try:
        code = api_process.wait(timeout=config.API_STARTUP_WAIT)
    except subprocess.TimeoutExpired:
        print(f"API server started (PID: {api_process.pid})")
        print("="*60)
        for label, url in portal_urls():
            print(f"{label + ':':<14}{url}")
        print("="*60)
        return True

    print(f"API server exited during startup (code {code}); web portal disabled")
    api_process = None
    return False


def cleanup_api_server():
    """Terminate the API server when the main application exits"""
    global api_process
    if api_process is None:
        return
    try:
        api_process.terminate()
        api_process.wait(timeout=5)
        print("API server stopped")
    except (OSError, subprocess.TimeoutExpired) as e:
        print(f"Error stopping API server: {e}")
    api_process = None


def main():
    if config.WEB_PORTAL_ENABLED and start_api_server():
        atexit.register(cleanup_api_server)

    root = tk.Tk()
    SimpleCalcGUI(root)
    root.mainloop()

    cleanup_api_server()


if __name__ == "__main__":
    main()
