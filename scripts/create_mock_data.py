import json

from casarubia.main import create_app
from casarubia.mock_data import create_mock_data

if __name__ == "__main__":
    summary = create_mock_data(create_app())
    print(json.dumps(summary, indent=2))
