"""Basic test to verify test infrastructure is working."""


def test_project_structure():
    """Verify that the project structure is set up correctly."""
    import sid

    assert hasattr(sid, "__version__")
    assert sid.__version__ == "0.1.0"
