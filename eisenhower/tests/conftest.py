import pytest

from eisenhower.domain.category import Category
from eisenhower.matrix.list_matrix import ListMatrix
from eisenhower.matrix.set_matrix import SetMatrix


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep settings tests independent of the developer's shell and .env file."""
    for name in (
        "EISENHOWER_MATRIX_KIND",
        "EISENHOWER_MATRIX_POLICY",
        "EISENHOWER_LOG_LEVEL",
        "EISENHOWER_LOG_JSON_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def list_matrix():
    return ListMatrix()


@pytest.fixture
def set_matrix():
    return SetMatrix()


@pytest.fixture(params=[ListMatrix, SetMatrix], ids=["list", "set"])
def matrix(request):
    """An empty matrix of each variant, for behavior both must share."""
    return request.param()


@pytest.fixture
def populated(matrix):
    matrix.add_task("Pay taxes", Category.DO_IT_NOW)
    matrix.add_task("Fix prod bug", Category.DO_IT_NOW)
    matrix.add_task("Plan vacation", Category.SCHEDULE_IT)
    matrix.add_task("Answer emails", Category.DELEGATE_OR_OPTIMIZE_IT)
    matrix.add_task("Watch TV", Category.ELIMINATE_IT)
    return matrix
