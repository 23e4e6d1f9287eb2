"""
日志初始化测试
"""

from loguru import logger

from thuai_agent.utils.logger import SetupLogger


def test_setup_logger_console_only(restore_logger, capsys):
    SetupLogger(level="WARNING")
    logger.info("hidden message")
    logger.warning("visible message")
    err = capsys.readouterr().err
    assert "visible message" in err
    assert "hidden message" not in err


def test_setup_logger_writes_file(restore_logger, tmp_path):
    log_dir = tmp_path / "logs"
    SetupLogger(level="DEBUG", log_dir=str(log_dir))
    logger.debug("written to file")
    logger.complete()

    files = list(log_dir.glob("thuai_agent_*.log"))
    assert len(files) == 1
    assert "written to file" in files[0].read_text(encoding="utf-8")
