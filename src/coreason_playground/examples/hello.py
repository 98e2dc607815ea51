print("Hello, playground!")
