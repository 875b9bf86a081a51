"""
╔═══════════════════════════════════════════════════════════════════════════════╗
║                           INTERIOR STUDIO                                     ║
║              Photorealistic Interior Image Editing with Gemini                ║
╚═══════════════════════════════════════════════════════════════════════════════╝

Main Entry Point
"""

import os
import socket
import threading
import time
import webbrowser

from config import ModelConfig, ServerConfig
from ui.layout import create_app


def find_available_port(start_port=ServerConfig.DEFAULT_PORT, max_attempts=1000):
    for i in range(max_attempts):
        port = start_port + i
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("127.0.0.1", port)) != 0:
                return port
    raise RuntimeError(f"No available port found after {max_attempts} attempts")


def start_browser(port):
    """Launch the default web browser after a short delay."""
    time.sleep(2)
    webbrowser.open(f"http://127.0.0.1:{port}")


def main():
    # 1. Check credentials early; the UI still starts and reports the error per request
    if not ModelConfig.get_env_api_key():
        print("[Warning] No API key found. Set GEMINI_API_KEY (or API_KEY) before generating.")

    # 2. Pick a port
    port = find_available_port(ServerConfig.get_start_port())

    # 3. Start Browser Thread
    if ServerConfig.OPEN_BROWSER:
        threading.Thread(target=start_browser, args=(port,), daemon=True).start()

    # 4. Launch Gradio App
    print(f"[Interior Studio] Model: {ModelConfig.get_model_name()}")
    print(f"[Interior Studio] Running on http://127.0.0.1:{port}")
    app = create_app()
    app.queue(default_concurrency_limit=ServerConfig.GENERATION_CONCURRENCY)

    try:
        app.launch(
            inbrowser=False,
            server_name="0.0.0.0",
            server_port=port,
            show_error=True,
            allowed_paths=[ServerConfig.DOWNLOAD_DIR],
            favicon_path="icon.ico" if os.path.exists("icon.ico") else None
        )
    except KeyboardInterrupt:
        pass

    print("Stopping...")


if __name__ == "__main__":
    main()
