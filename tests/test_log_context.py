import logging

from services.log_context import ContextFilter, comparison_id_context, new_comparison_id, setup_logging


def create_log_record(msg):
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname=__file__, lineno=0, msg=msg, args=(), exc_info=None
    )


def test_context_filter_injects_comparison_id():
    comparison_id_context.set("abc123")
    record = create_log_record("Compared documents")
    assert ContextFilter().filter(record) is True
    assert record.msg == "[abc123] Compared documents"


def test_context_filter_without_comparison_id():
    comparison_id_context.set(None)
    record = create_log_record("Compared documents")
    assert ContextFilter().filter(record) is True
    assert record.msg == "Compared documents"


def test_new_comparison_id_binds_context():
    comparison_id = new_comparison_id()
    assert len(comparison_id) == 8
    assert comparison_id_context.get() == comparison_id


def test_setup_logging_installs_single_handler():
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    try:
        setup_logging("DEBUG")
        setup_logging("WARNING")
        assert len(root_logger.handlers) == 1
        assert any(isinstance(f, ContextFilter) for f in root_logger.handlers[0].filters)
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
