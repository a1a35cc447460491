from lambdas.main import main

main()
