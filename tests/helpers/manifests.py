"""Sample manifest contents shared across tests."""

SAMPLE_CARGO = """[package]
name = "demo"
version = "0.3.0"
edition = "2021"

# Keep in step with package.json
[dependencies]
serde = { version = "1.0", features = ["derive"] }
"""
