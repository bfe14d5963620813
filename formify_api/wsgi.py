# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process entry point; configuration is read from the environment once."""

from formify_api.app import create_app
from formify_api.shared.config import load_config

config = load_config()
app = create_app(config)


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=config.port, debug=not config.is_production())
