import timeit
import matplotlib.pyplot as plt
import numpy as np
import statistics # Usaremos para calcular a média

from namespacefs import MAX_ENTRIES, NamespaceFileSystem

def construir_cadeia(fs, profundidade):
    """
    Cria uma cadeia de diretórios aninhados e retorna o mais profundo.
    """
    atual = fs.root
    for nivel in range(profundidade):
        nome = f"d{nivel}"
        fs.make_directory(atual, [nome])
        atual = fs.change_directory(atual, [nome])
    return atual

def construir_arvore(fs, largura, profundidade):
    """
    Cria uma árvore completa com `largura` filhos por diretório.
    """
    nivel_atual = [fs.root]
    for _ in range(profundidade):
        proximo_nivel = []
        for diretorio in nivel_atual:
            for i in range(largura):
                fs.make_directory(diretorio, [f"d{i}"])
            proximo_nivel.extend(diretorio.get_children())
        nivel_atual = proximo_nivel

def benchmark_criacao(num_arquivos_lista, num_repeticoes):
    """
    Mede o tempo de `touch` até encher o diretório, retornando a média.
    """
    tempos_medios = []

    print("Iniciando benchmark de criação de arquivos...")
    for num_arquivos in num_arquivos_lista:
        tempos_desta_execucao = []
        for i in range(num_repeticoes):
            fs = NamespaceFileSystem()
            nomes = [f"file_{n}" for n in range(num_arquivos)]

            def stmt():
                for nome in nomes:
                    fs.make_file(fs.root, [nome])

            # O número 1 aqui significa que timeit medirá o tempo de uma única execução,
            # já que o nosso loop de repetições já está controlando o número de amostras.
            tempo = timeit.timeit(stmt, number=1)
            tempos_desta_execucao.append(tempo)

        tempo_medio = statistics.mean(tempos_desta_execucao)
        tempos_medios.append(tempo_medio)
        print(f"  - {num_arquivos} arquivos: {tempo_medio:.6f}s")

    return tempos_medios

def benchmark_pwd(profundidades, num_repeticoes):
    """
    Mede o tempo de reconstrução do caminho em função da profundidade.
    """
    tempos_medios = []
    num_nos = int(profundidades.max()) + 1

    print("Iniciando benchmark de pwd...")
    for profundidade in profundidades:
        tempos_desta_execucao = []
        for i in range(num_repeticoes):
            fs = NamespaceFileSystem(num_nos)
            mais_profundo = construir_cadeia(fs, int(profundidade))

            stmt = lambda: fs.print_working_directory(mais_profundo)

            tempo = timeit.timeit(stmt, number=1)
            tempos_desta_execucao.append(tempo)

        tempo_medio = statistics.mean(tempos_desta_execucao)
        tempos_medios.append(tempo_medio)
        print(f"  - profundidade {profundidade}: {tempo_medio:.6f}s")

    return tempos_medios

def benchmark_destruicao(profundidades, largura, num_repeticoes):
    """
    Mede o tempo de teardown de árvores completas de tamanho crescente.
    """
    tempos_medios = []
    tamanhos = []

    print("Iniciando benchmark de destruição...")
    for profundidade in profundidades:
        tempos_desta_execucao = []
        for i in range(num_repeticoes):
            fs = NamespaceFileSystem(largura ** (int(profundidade) + 1))
            construir_arvore(fs, largura, int(profundidade))
            total_nos = fs.used_nodes()

            tempo = timeit.timeit(fs.teardown, number=1)
            tempos_desta_execucao.append(tempo)

        tempo_medio = statistics.mean(tempos_desta_execucao)
        tempos_medios.append(tempo_medio)
        tamanhos.append(total_nos)
        print(f"  - {total_nos} diretórios: {tempo_medio:.6f}s")

    return tamanhos, tempos_medios

if __name__ == "__main__":
    # --- Parâmetros do Benchmark ---
    num_arquivos_teste = np.arange(1, MAX_ENTRIES + 1)
    profundidades_pwd = np.arange(1, 200, 10)
    profundidades_arvore = np.arange(1, 5)
    largura_arvore = 4
    # Número de vezes que cada teste será repetido para tirar a média
    NUM_REPETICOES = 10

    # --- Execução do Benchmark ---
    tempos_criacao = benchmark_criacao(num_arquivos_teste, NUM_REPETICOES)
    tempos_pwd = benchmark_pwd(profundidades_pwd, NUM_REPETICOES)
    tamanhos_arvore, tempos_destruicao = benchmark_destruicao(profundidades_arvore, largura_arvore, NUM_REPETICOES)

    print("\nBenchmark concluído. Gerando gráficos...")

    # --- Geração dos Gráficos ---
    plt.style.use('seaborn-v0_8-whitegrid')

    # Gráfico de Desempenho de Criação
    plt.figure(figsize=(12, 7))
    plt.plot(num_arquivos_teste, tempos_criacao, marker='o', linestyle='-', label='touch')
    plt.xlabel("Quantidade de Arquivos")
    plt.ylabel(f"Tempo Médio de {NUM_REPETICOES} execuções (s)")
    plt.title("Benchmark de Criação de Arquivos")
    plt.legend()
    plt.grid(True)
    plt.show()

    # Gráfico de Desempenho do pwd
    plt.figure(figsize=(12, 7))
    plt.plot(profundidades_pwd, tempos_pwd, marker='x', linestyle='--', label='pwd')
    plt.xlabel("Profundidade do Diretório")
    plt.ylabel(f"Tempo Médio de {NUM_REPETICOES} execuções (s)")
    plt.title("Benchmark de Reconstrução de Caminho")
    plt.legend()
    plt.grid(True)
    plt.show()

    # Gráfico de Desempenho da Destruição
    plt.figure(figsize=(12, 7))
    plt.plot(tamanhos_arvore, tempos_destruicao, marker='o', linestyle='-', label='teardown')
    plt.xlabel("Quantidade de Diretórios")
    plt.ylabel(f"Tempo Médio de {NUM_REPETICOES} execuções (s)")
    plt.title("Benchmark de Destruição da Árvore")
    plt.legend()
    plt.grid(True)
    plt.show()
