import sys
import argparse
from rc5.models import (RC5Params, bcolors)
from rc5.core import (generate_key, schedule_from_key, load_key, encrypt_message, decrypt_message, format_schedule)
from rc5.utils.encryption import (encrypt_block, decrypt_block, bytes_to_block, block_to_bytes)
from rc5.utils.keystore import (create_keystore, store_key_in_keystore)

def add_param_args(parser: argparse.ArgumentParser, key_len: bool = False):
    parser.add_argument("--w", type=int, default=RC5Params.w, help="Word width in bits")
    parser.add_argument("--rounds", type=int, default=RC5Params.rounds, help="Number of rounds")
    if key_len:
        parser.add_argument("--key_len", type=int, default=RC5Params.key_len, help="Key length in bytes")

def add_key_args(parser: argparse.ArgumentParser):
    parser.add_argument("--key", help="Secret key (hex)")
    parser.add_argument("--keystore", help="Keystore filename")
    parser.add_argument("--passphrase", help="Keystore passphrase")
    parser.add_argument("--key_name", help="Key name in keystore")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RC5 - parameterised block cipher RC5-w/r/b")
    subparsers = parser.add_subparsers(dest="command")

    create_keystore_parser = subparsers.add_parser("create_keystore", help="Create encrypted keystore")
    create_keystore_parser.add_argument("--passphrase", required=True, help="Keystore passphrase")
    create_keystore_parser.add_argument("--keystore_file", default="keystore.json", help="Keystore filename")

    generate_parser = subparsers.add_parser("generate_key", help="Generate a random secret key")
    add_param_args(generate_parser, key_len=True)
    generate_parser.add_argument("--keystore", help="Keystore filename")
    generate_parser.add_argument("--passphrase", help="Keystore passphrase")
    generate_parser.add_argument("--key_name", help="Key name in keystore")

    schedule_parser = subparsers.add_parser("schedule", help="Print the expanded key")
    add_param_args(schedule_parser)
    add_key_args(schedule_parser)

    for name, help_text in (("encrypt_block", "Encrypt one raw block"), ("decrypt_block", "Decrypt one raw block")):
        block_parser = subparsers.add_parser(name, help=help_text)
        add_param_args(block_parser)
        add_key_args(block_parser)
        block_parser.add_argument("--block", required=True, help="Block (hex, 2w/8 bytes)")

    for name, help_text in (("encrypt", "Encrypt a file"), ("decrypt", "Decrypt a file")):
        file_parser = subparsers.add_parser(name, help=help_text)
        add_param_args(file_parser)
        add_key_args(file_parser)
        file_parser.add_argument("--in_path", required=True, help="Input file path")
        file_parser.add_argument("--out_path", required=True, help="Output file path")

    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        match args.command:
            case "create_keystore":
                create_keystore(args.passphrase, args.keystore_file)
                print(f"Keystore created: {args.keystore_file}")
            case "generate_key":
                params = RC5Params(w=args.w, rounds=args.rounds, key_len=args.key_len)
                key = generate_key(params)
                if args.keystore and args.passphrase and args.key_name:
                    store_key_in_keystore(args.passphrase, args.key_name,
                                          {"key": key.hex(), "w": params.w, "rounds": params.rounds}, args.keystore)
                    print(f"{params} key stored in keystore as {args.key_name}")
                else:
                    print(key.hex())
            case "schedule":
                key, params = load_key(args.key, args.keystore, args.passphrase, args.key_name,
                                       RC5Params(w=args.w, rounds=args.rounds))
                print(f"{bcolors.BOLD}{params}{bcolors.ENDC}")
                for line in format_schedule(schedule_from_key(key, params), params.w):
                    print(line)
            case "encrypt_block" | "decrypt_block":
                key, params = load_key(args.key, args.keystore, args.passphrase, args.key_name,
                                       RC5Params(w=args.w, rounds=args.rounds))
                S = schedule_from_key(key, params)
                block = bytes_to_block(bytes.fromhex(args.block), params.w)
                op = encrypt_block if args.command == "encrypt_block" else decrypt_block
                print(block_to_bytes(op(block, S, params.w, params.rounds), params.w).hex())
            case "encrypt" | "decrypt":
                key, params = load_key(args.key, args.keystore, args.passphrase, args.key_name,
                                       RC5Params(w=args.w, rounds=args.rounds))
                with open(args.in_path, "rb") as f:
                    data = f.read()
                op = encrypt_message if args.command == "encrypt" else decrypt_message
                with open(args.out_path, "wb") as f:
                    f.write(op(data, key, params))
                print(f"{bcolors.OKGREEN}{args.command.capitalize()}ed with {params}: {args.out_path}{bcolors.ENDC}")
            case _:
                parser.print_help()
    except Exception as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
