from boundgen.cli import boundgen

if __name__ == "__main__":
    boundgen()
