"""Domain Models 单元测试

测试内容：
1. 标题校验
2. TaskDraft / Task 两种形态
3. Pydantic 模型校验与不可变性
"""

import pytest
from pydantic import ValidationError
from taskboard.core.exceptions import TaskValidationError
from taskboard.core.models import Task, TaskDraft, normalize_title


class TestNormalizeTitle:
    """标题校验测试"""

    def test_valid_title_returned_unchanged(self):
        assert normalize_title("write report") == "write report"

    def test_surrounding_whitespace_kept(self):
        """合法标题不做裁剪"""
        assert normalize_title("  buy milk ") == "  buy milk "

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_empty_or_blank_rejected(self, title):
        with pytest.raises(TaskValidationError) as exc_info:
            normalize_title(title)
        assert exc_info.value.code == "TASK_TITLE_INVALID"

    def test_long_title_accepted(self):
        """非空即合法，不设长度上限"""
        title = "x" * 5000
        assert normalize_title(title) == title


class TestTaskDraft:
    """草稿形态测试"""

    def test_defaults_to_incomplete(self):
        draft = TaskDraft(title="buy milk")
        assert draft.completed is False

    def test_has_no_id(self):
        draft = TaskDraft(title="buy milk")
        assert not hasattr(draft, "id")

    def test_frozen(self):
        draft = TaskDraft(title="buy milk")
        with pytest.raises(ValidationError):
            draft.title = "other"


class TestTask:
    """已持久化形态测试"""

    def test_id_required(self):
        with pytest.raises(ValidationError):
            Task(title="no id")

    def test_with_completed_returns_full_next_state(self):
        task = Task(id=1, title="write report", completed=False)
        toggled = task.with_completed(True)

        assert toggled == Task(id=1, title="write report", completed=True)
        # 原对象不变
        assert task.completed is False

    def test_dump_shape(self):
        task = Task(id=7, title="t", completed=True)
        assert task.model_dump() == {"id": 7, "title": "t", "completed": True}

    def test_frozen(self):
        task = Task(id=1, title="t")
        with pytest.raises(ValidationError):
            task.completed = True
