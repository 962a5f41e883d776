import pytest

from funclab.config.log_config import LogConfig
from funclab.utils.logger import Logging, init_logging, logs


def test_catch_reraises_and_logs(captured_logs):
    @logs.catch(msg="division failed", log_time=False)
    def divide(a, b):
        return a // b

    with pytest.raises(ZeroDivisionError):
        divide(1, 0)

    assert any("[ERROR] divide: division failed" in r["message"] for r in captured_logs)


def test_catch_logs_inputs_outputs(captured_logs):
    @logs.catch(log_inputs=True, log_outputs=True, log_time=False)
    def add(a, b):
        return a + b

    assert add(2, b=3) == 5

    messages = [r["message"] for r in captured_logs]
    assert any(m.startswith("[CALL] add") for m in messages)
    assert "[RETURN] add result=5" in messages


def test_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    lg = Logging(log_dir=str(log_dir), log_level="DEBUG")
    lg.info("hello file sink")

    files = list(log_dir.glob("*.log"))
    assert len(files) == 1
    assert "hello file sink" in files[0].read_text(encoding="utf-8")


def test_init_logging_from_config(tmp_path):
    cfg = LogConfig(dir=str(tmp_path / "cfg_logs"), level="WARNING")
    lg = init_logging(cfg)

    assert isinstance(lg, Logging)
    assert lg.level == "WARNING"
    assert (tmp_path / "cfg_logs").is_dir()
