from buf_cycle.debug_log import DebugLogger


class TestDebugLogger:
    def test_disabled_by_default(self, tmp_path):
        logger = DebugLogger(str(tmp_path / "dbg.log"))
        logger.log("start", walk=["a"])
        assert not (tmp_path / "dbg.log").exists()

    def test_writes_events(self, tmp_path):
        path = tmp_path / "dbg.log"
        logger = DebugLogger(str(path))
        logger.start()
        logger.log("finish", chosen="notes", reason="timeout")
        logger.stop()
        text = path.read_text(encoding="utf-8")
        assert "Session started" in text
        assert "finish" in text
        assert "chosen='notes' reason='timeout'" in text

    def test_toggle(self, tmp_path):
        logger = DebugLogger(str(tmp_path / "dbg.log"))
        assert logger.toggle() is True
        assert logger.toggle() is False
        logger.log("advance", index=1)
