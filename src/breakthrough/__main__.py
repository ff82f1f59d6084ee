from breakthrough.app import main

main()
