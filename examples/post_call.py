import sys

import chaincall
from chaincall import logs


def main():
    logs.init(debug_level=2)

    url = sys.argv[1] if len(sys.argv) > 1 else chaincall.utils.DEFAULT_URL
    client = chaincall.Client(url, timeout=10)
    print(f'{client.url} up: {client.is_provider_up()}')

    # the request record itself is serialized by the caller; only the
    # contract call data is produced here
    call_data = client.call_data(
        '{"arguments": [{"argument_type": "u32", "argument_value": "7"}]}'
    )
    print(f'call data: {call_data.hex()}')


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
