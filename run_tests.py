import sys

# tests/conftest.py loads .env.test for the session
if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main(["-v", *sys.argv[1:]]))
