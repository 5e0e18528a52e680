pytest_plugins = ["devtesting.pytest_plugin", "pytester"]
