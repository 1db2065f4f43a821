GNU_LINUX = {
    "CARGO_CFG_TARGET_OS": "linux",
    "CARGO_CFG_TARGET_ENV": "gnu",
    "CARGO_CFG_TARGET_FAMILY": "unix",
    "CARGO_CFG_TARGET_POINTER_WIDTH": "64",
    "CARGO_CFG_HOST_ARCH": "x86_64",
    "CARGO_CFG_TARGET_ARCH": "x86_64",
    "TARGET": "x86_64-unknown-linux-gnu",
}

MSVC_WINDOWS = {
    "CARGO_CFG_TARGET_OS": "windows",
    "CARGO_CFG_TARGET_ENV": "msvc",
    "CARGO_CFG_TARGET_FAMILY": "windows",
    "CARGO_CFG_TARGET_POINTER_WIDTH": "64",
    "CARGO_CFG_HOST_ARCH": "x86_64",
    "CARGO_CFG_TARGET_ARCH": "x86_64",
    "TARGET": "x86_64-pc-windows-msvc",
}


def environ(base, **overrides):
    env = dict(base)
    env.update(overrides)
    return env


class FakeRunner:
    """Stands in for run_shell_command and records every command it is given."""

    def __init__(self, failures=None, outputs=None):
        self.failures = failures or {}
        self.outputs = outputs or {}
        self.calls = []

    def __call__(self, command, stream_output=False, env=None, cwd=None):
        self.calls.append({"command": list(command), "env": env, "cwd": cwd})
        key = " ".join(command)
        for prefix, returncode in self.failures.items():
            if key.startswith(prefix):
                return "", f"{prefix} failed", returncode
        for prefix, stdout in self.outputs.items():
            if key.startswith(prefix):
                return stdout, "", 0
        return "", "", 0

    @property
    def commands(self):
        return [" ".join(call["command"]) for call in self.calls]
