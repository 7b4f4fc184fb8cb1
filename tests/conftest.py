import pytest


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.statements = []
        self.last_params = None

    def execute(self, sql, params=None):
        self.statements.append(sql)
        self.last_params = params
        self.connection.active = True
        self.connection.log.append(("execute", sql))

    def executemany(self, sql, seq):
        self.statements.append(sql)
        self.last_params = list(seq)
        self.connection.active = True
        self.connection.log.append(("executemany", sql))

    def fetchall(self):
        return [(1,)]


class FakeConnection:
    def __init__(self, database, **options):
        self.database = database
        self.options = options
        self.closed = False
        self.active = False
        self.log = []

    def is_closed(self):
        return self.closed

    def is_active(self):
        return self.active

    def cursor(self):
        return FakeCursor(self)

    def execute_immediate(self, sql):
        self.active = True
        self.log.append(("execute_immediate", sql))

    def begin(self):
        if self.active:
            raise RuntimeError("Transaction already active")
        self.active = True
        self.log.append(("begin",))

    def commit(self, retaining=False):
        self.active = retaining
        self.log.append(("commit", retaining))

    def rollback(self, retaining=False):
        self.active = retaining
        self.log.append(("rollback", retaining))

    def close(self):
        self.closed = True


class FakeDriver:
    def __init__(self):
        self.connections = []

    def connect(self, database, **options):
        conn = FakeConnection(database, **options)
        self.connections.append(conn)
        return conn


@pytest.fixture
def fake_driver(monkeypatch):
    driver = FakeDriver()
    monkeypatch.setattr("birdsql.adapters.firebird._load_driver", lambda: driver)
    return driver
