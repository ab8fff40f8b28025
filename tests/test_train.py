from mlperceptron import activation, config, sample, train


class TestDriver:
    def test_build_network(self):
        net = train.build_network()
        assert [layer.input_size for layer in net.layers] == [2, 2]
        assert [len(layer) for layer in net.layers] == [2, 1]
        assert net.layers[0].activation_fn is activation.sigmoid

    def test_build_network_custom(self):
        net = train.build_network(3, 4, 2, activation.HYPERBOLIC_TANGENT)
        assert [len(layer) for layer in net.layers] == [4, 2]
        assert net.layers[1].activation_fn is activation.hyperbolic_tangent

    def test_train_table_prints_results(self, capsys):
        cfg = config.TrainingConfig(learning_rate=0.5, target_error=0.01, max_epochs=50000, log_every=0)
        net = train.train_table('OR', sample.OR, cfg)
        out = capsys.readouterr().out
        assert 'Results of training (OR)' in out
        assert '[0.0, 0.0] -> ' in out
        assert net.predict([0, 0])[0] < 0.5
        assert net.predict([1, 1])[0] > 0.5
