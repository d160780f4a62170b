from wise_balance_proxy.main import main

if __name__ == "__main__":
    main()
