import chaincall

ARGUMENTS = '''
{
    "arguments": [
        {"argument_type": "[u8;32]", "argument_value": "[1,2,3,4,5,6,7,8,9,0,1,2,3,4,5,6,7,8,9,0,1,2,3,4,5,6,7,8,9,0,1,2]"},
        {"argument_type": "u64", "argument_value": "1000000"},
        {"argument_type": "Vec<Option<String>>", "argument_value": "[\\"memo\\", null]"}
    ]
}
'''


def main():
    for type_name, value in chaincall.read_arguments(ARGUMENTS):
        data = chaincall.serialize_call_argument(value, type_name)
        print(f'{type_name:>24} {data.hex()}')

    call_data = chaincall.encode_call_data(ARGUMENTS)
    print(f'{"call data":>24} {call_data.hex()}')

    result = chaincall.serialize_call_argument('["memo", null]', 'Vec<Option<String>>')
    print(chaincall.call_result_to_data_type(result, 'Vec<Option<String>>'))


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
