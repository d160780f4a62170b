import os
import requests

proxy = os.environ.get("PROXY_URL", "http://localhost:8080").rstrip("/")
token = os.environ.get("USER_TOKEN", "")
timeout = float(os.environ.get("HTTP_TIMEOUT_SEC", "30"))

resp = requests.get(f"{proxy}/text", params={"user_token": token}, timeout=timeout)
print(resp.status_code)
print(resp.text, end="")
assert resp.status_code == 200, f"Unexpected status: {resp.status_code} {resp.text!r}"
