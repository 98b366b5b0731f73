"""Tee logger shared by the console transcript and the playtest harness."""

import json
import os


class Logger:
    """Tees output to both stdout and a log file, flushing after every write."""

    def __init__(self, log_dir: str, label: str, mode: str, echo: bool = True):
        os.makedirs(log_dir, exist_ok=True)
        safe = label.replace(" ", "_").replace("/", "_")
        self.path = os.path.join(log_dir, f"{safe}_{mode}.log")
        self.json_path = os.path.join(log_dir, f"{safe}_{mode}.json")
        self.echo = echo
        self.f = open(self.path, "w", encoding="utf-8")

    def log(self, msg: str = ""):
        if self.echo:
            print(msg)
        self.f.write(msg + "\n")
        self.f.flush()

    def write_json(self, data: dict):
        with open(self.json_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def close(self):
        self.f.close()
