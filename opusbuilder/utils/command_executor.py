import collections
import subprocess
from ..cli_logger import logger

STREAM_TAIL_LINES = 20


def run_shell_command(command, stream_output=False, env=None, cwd=None):
    """
    Executes a command and waits for it to finish.

    Args:
        command (list): The command to execute as a list of strings.
        stream_output (bool): If True, forwards the command's output to the
            logger line by line instead of capturing it.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (stdout, stderr, return_code). When the output is streamed,
        stdout holds the last STREAM_TAIL_LINES lines of the combined output
        and stderr is empty. A command that cannot be spawned returns
        -1 with the error text as stderr.
    """
    try:
        if stream_output:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                bufsize=1,
                universal_newlines=True,
                env=env,
                cwd=cwd
            )
            tail = collections.deque(maxlen=STREAM_TAIL_LINES)
            for line in process.stdout:
                logger.step_info(line.rstrip(), indent=4)
                tail.append(line)
            process.wait()
            return "".join(tail), "", process.returncode

        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            check=False,
            cwd=cwd
        )
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return "", str(e), -1
    except OSError as e:
        logger.error(f"Could not run {command[0]}: {e}")
        return "", str(e), -1
