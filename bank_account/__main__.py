from bank_account.main import main

main()
